from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from othello.core.board import Board
from othello.core.scoring import Outcome
from othello.players import Player
from othello.types import Seat


class Phase(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(slots=True)
class GameState:
    board: Board
    players: List[Player]
    current: Seat = Seat(0)
    phase: Phase = Phase.PLAYING
    last_status: str = "Let's start the game!"
    outcome: Optional[Outcome] = None

    @property
    def current_player(self) -> Player:
        return self.players[self.current]

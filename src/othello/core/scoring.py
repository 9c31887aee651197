from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence

from othello.core.board import Board
from othello.players import Player
from othello.types import Seat


@dataclass(frozen=True, slots=True)
class Outcome:
    scores: List[int]
    winner: Optional[Seat]
    tie: bool


def score(board: Board, seat: Seat) -> int:
    return sum(1 for row in board.grid for cell in row if cell == seat)


def scores(board: Board, player_count: int) -> List[int]:
    counts = [0] * player_count
    for row in board.grid:
        for cell in row:
            if cell is not None and cell < player_count:
                counts[cell] += 1
    return counts


def evaluate_outcome(board: Board, players: Sequence[Player]) -> Outcome:
    """
    Winner is the single seat holding the highest count. The number of seats
    at the running maximum is tracked, so a later strictly higher score
    clears an earlier tie between lower scores.
    """
    counts = scores(board, len(players))

    best = -1
    leader: Optional[Seat] = None
    at_max = 0
    for i, n in enumerate(counts):
        if n > best:
            best = n
            leader = Seat(i)
            at_max = 1
        elif n == best:
            at_max += 1

    tie = at_max > 1
    return Outcome(scores=counts, winner=None if tie else leader, tie=tie)

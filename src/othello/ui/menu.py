from __future__ import annotations

import logging
from typing import Optional

from othello.core.board import Board
from othello.game.controller import run_game
from othello.ui.prompts import Reader, first_turn, normalize_size, prompt_board_size, prompt_players

logger = logging.getLogger(__name__)


def run_menu(size: Optional[int] = None, first: int = 0, show_hints: bool = False, read: Reader = input) -> None:
    players = prompt_players(read)
    turn = first_turn(len(players), first)

    for i, p in enumerate(players, start=1):
        print(f"Player {i} is called {p.name}, represented by colour {p.colour} and symbol {p.symbol}")
    print(f"{players[turn].name} is first!")

    n = prompt_board_size(read) if size is None else normalize_size(size)
    logger.info("Starting %dx%d game, first seat %d", n, n, turn)

    run_game(players, Board.start(n), first=turn, read=read, show_hints=show_hints)

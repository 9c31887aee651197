from __future__ import annotations
from typing import Set

from othello import config
from othello.core.notation import letter_at_index
from othello.core.rules import legal_moves
from othello.core.scoring import scores
from othello.game.results import score_lines
from othello.game.state import GameState
from othello.types import Cell, Coord
from othello.ui.colors import c, named, BOLD, DIM, FG_CYAN, FG_GRAY


def _piece(state: GameState, cell: Cell, hint: bool = False) -> str:
    if cell is None:
        return c("+", FG_CYAN) if hint else c("·", FG_GRAY)
    p = state.players[cell]
    return named(p.symbol, p.colour)


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(state: GameState, show_hints: bool = False) -> None:
    clear_screen()
    board = state.board

    print(c("Welcome to Othello!! Game on!!", BOLD))
    print()
    print(c(state.last_status, FG_CYAN) if state.last_status else "")
    print()

    for line in score_lines(scores(board, len(state.players)), state.players):
        print(line)
    print()

    hints: Set[Coord] = set(legal_moves(board, state.current)) if show_hints else set()

    header = "    " + " ".join(letter_at_index(i) for i in range(board.cols))
    print(c(header, DIM))
    for r in range(board.rows):
        parts = [_piece(state, board.grid[r][ci], (r, ci) in hints) for ci in range(board.cols)]
        print(f" {c(letter_at_index(r), DIM)} | " + " ".join(parts) + " |")
    print(c("   " + "—" * (2 * board.cols + 3), DIM))
    print(c("   Enter row then column letters (e.g. df), skip or quit.", DIM))

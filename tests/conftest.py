from __future__ import annotations

from typing import Callable, Iterable, List

import pytest

from othello import config
from othello.core.board import Board
from othello.players import Player
from othello.types import Cell, Seat

SYMBOLS = {".": None, "O": Seat(0), "X": Seat(1), "Z": Seat(2)}


@pytest.fixture
def players() -> List[Player]:
    return [Player("white", "O", "White"), Player("black", "X", "Black")]


@pytest.fixture
def make_board() -> Callable[[Iterable[str]], Board]:
    """Build a board from rows of '.', 'O' (seat 0), 'X' (seat 1), 'Z' (seat 2)."""

    def _make(rows: Iterable[str]) -> Board:
        grid: List[List[Cell]] = [[SYMBOLS[ch] for ch in row] for row in rows]
        return Board(len(grid), len(grid[0]), grid)

    return _make


@pytest.fixture
def plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)


def scripted(*answers: str) -> Callable[[str], str]:
    it = iter(answers)
    return lambda prompt="": next(it)


@pytest.fixture
def reader() -> Callable[..., Callable[[str], str]]:
    return scripted

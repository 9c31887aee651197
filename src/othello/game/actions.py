from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from othello.config import QUIT_TOKEN, SKIP_TOKEN
from othello.core.notation import parse_move


@dataclass(frozen=True, slots=True)
class Place:
    row: int
    col: int


@dataclass(frozen=True, slots=True)
class Skip:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


Action = Union[Place, Skip, Quit]


def parse_action(raw: str) -> Action:
    s = raw.strip()
    if s.lower() == QUIT_TOKEN:
        return Quit()
    if s.lower() == SKIP_TOKEN:
        return Skip()
    row, col = parse_move(s)
    return Place(row, col)

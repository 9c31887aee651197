# src/othello/types.py

from __future__ import annotations
from enum import Enum
from typing import NewType, Optional, Tuple

Seat = NewType("Seat", int)   # index into the game's player list
Cell = Optional[Seat]         # None == empty
Coord = Tuple[int, int]       # (row, col)


class Occupancy(Enum):
    EMPTY = "empty"
    OWN = "own"
    OPPONENT = "opponent"

from __future__ import annotations
from typing import Tuple

# (d_row, d_col) for every axis and diagonal
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, 1),
    (0, -1),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
)

# src/othello/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List

from othello.config import DEFAULT_SIZE, MAX_SIZE, MIN_SIZE
from othello.types import Cell, Coord, Seat


def valid_size(n: int) -> bool:
    return MIN_SIZE <= n <= MAX_SIZE and n % 2 == 0


@dataclass(slots=True)
class Board:
    rows: int = DEFAULT_SIZE
    cols: int = DEFAULT_SIZE
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not valid_size(self.rows) or not valid_size(self.cols):
            raise ValueError(
                f"Board dimensions must be even and between {MIN_SIZE} and {MAX_SIZE}, "
                f"got {self.rows}x{self.cols}."
            )
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]
        elif len(self.grid) != self.rows or any(len(row) != self.cols for row in self.grid):
            raise ValueError("Grid shape does not match board dimensions.")

    @classmethod
    def start(cls, rows: int = DEFAULT_SIZE, cols: int | None = None) -> "Board":
        """
        Standard opening: seat 0 on the main diagonal of the centre square,
        seat 1 on the anti-diagonal.
        """
        b = cls(rows, rows if cols is None else cols)
        mr, mc = b.rows // 2, b.cols // 2
        b.grid[mr - 1][mc - 1] = Seat(0)
        b.grid[mr][mc] = Seat(0)
        b.grid[mr - 1][mc] = Seat(1)
        b.grid[mr][mc - 1] = Seat(1)
        return b

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def at(self, r: int, c: int) -> Cell:
        return self.grid[r][c]

    def place(self, r: int, c: int, seat: Seat) -> None:
        self.grid[r][c] = seat

    def coords(self) -> Iterator[Coord]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield r, c

    def occupied(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell is not None)

    def is_full(self) -> bool:
        return all(cell is not None for row in self.grid for cell in row)

from __future__ import annotations
from typing import List

from othello.core.board import Board
from othello.core.directions import DIRECTIONS
from othello.core.rules import classify, scan_direction
from othello.types import Coord, Occupancy, Seat


def _line(board: Board, seat: Seat, row: int, col: int, d_row: int, d_col: int) -> List[Coord]:
    # Opponent discs between (row, col) and the closing own disc.
    out: List[Coord] = []
    r, c = row + d_row, col + d_col
    while classify(board.at(r, c), seat) is Occupancy.OPPONENT:
        out.append((r, c))
        r += d_row
        c += d_col
    return out


def captures(board: Board, seat: Seat, row: int, col: int) -> List[Coord]:
    """
    Discs that a placement at (row, col) would flip. Does not touch the board.
    """
    flipped: List[Coord] = []
    for d_row, d_col in DIRECTIONS:
        if scan_direction(board, seat, row + d_row, d_row, col + d_col, d_col):
            flipped.extend(_line(board, seat, row, col, d_row, d_col))
    return flipped


def apply_move(board: Board, seat: Seat, row: int, col: int) -> Board:
    """
    Place a disc for `seat` and flip every captured line.

    The caller must have checked is_legal() first; an illegal placement is
    written as-is.
    """
    flipped = captures(board, seat, row, col)
    board.place(row, col, seat)
    for r, c in flipped:
        board.place(r, c, seat)
    return board

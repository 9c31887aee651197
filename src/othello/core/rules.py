from __future__ import annotations
from typing import List

from othello.core.board import Board
from othello.core.directions import DIRECTIONS
from othello.types import Cell, Coord, Occupancy, Seat


def classify(cell: Cell, seat: Seat) -> Occupancy:
    if cell is None:
        return Occupancy.EMPTY
    if cell == seat:
        return Occupancy.OWN
    return Occupancy.OPPONENT


def scan_direction(board: Board, seat: Seat, row: int, d_row: int, col: int, d_col: int) -> bool:
    """
    Sandwich check along one ray. (row, col) is the first cell past the
    placement; it must hold an opponent disc, and the run of opponent discs
    must end on one of the mover's discs before an empty cell or the edge.
    """
    if not board.in_bounds(row, col):
        return False
    if classify(board.at(row, col), seat) is not Occupancy.OPPONENT:
        return False

    row += d_row
    col += d_col
    while board.in_bounds(row, col):
        kind = classify(board.at(row, col), seat)
        if kind is Occupancy.EMPTY:
            return False
        if kind is Occupancy.OWN:
            return True
        row += d_row
        col += d_col

    return False


def is_legal(board: Board, seat: Seat, row: int, col: int) -> bool:
    if not board.in_bounds(row, col):
        return False
    if board.at(row, col) is not None:
        return False

    for d_row, d_col in DIRECTIONS:
        if scan_direction(board, seat, row + d_row, d_row, col + d_col, d_col):
            return True
    return False


def has_any_legal_move(board: Board, seat: Seat) -> bool:
    if board.is_full():
        return False
    return any(is_legal(board, seat, r, c) for r, c in board.coords())


def legal_moves(board: Board, seat: Seat) -> List[Coord]:
    return [(r, c) for r, c in board.coords() if is_legal(board, seat, r, c)]

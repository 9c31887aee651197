from __future__ import annotations
from string import ascii_lowercase

from othello.types import Coord

NO_MOVE: Coord = (-1, -1)


def index_at_letter(ch: str) -> int:
    """'a' -> 0 ... 'z' -> 25; anything else -> -1."""
    if len(ch) != 1:
        return -1
    return ascii_lowercase.find(ch.lower())


def letter_at_index(i: int) -> str:
    return ascii_lowercase[i]


def parse_move(token: str) -> Coord:
    """
    Convert a two-letter token (row letter, column letter) into grid
    coordinates. Malformed tokens give NO_MOVE, which no board accepts.
    """
    if len(token) != 2:
        return NO_MOVE
    row = index_at_letter(token[0])
    col = index_at_letter(token[1])
    if row < 0 or col < 0:
        return NO_MOVE
    return row, col


def format_move(row: int, col: int) -> str:
    return letter_at_index(row) + letter_at_index(col)

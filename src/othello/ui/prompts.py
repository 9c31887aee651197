from __future__ import annotations
import random
from typing import Callable, List, Optional

from othello.config import DEFAULT_SIZE, PLAYER_ONE, PLAYER_TWO
from othello.core.board import valid_size
from othello.players import Player, new_player

Reader = Callable[[str], str]


def normalize_size(size: int) -> int:
    return size if valid_size(size) else DEFAULT_SIZE


def parse_size(raw: str) -> int:
    s = raw.strip()
    try:
        return normalize_size(int(s))
    except ValueError:
        return DEFAULT_SIZE


def first_turn(player_count: int, first: int, rng: Optional[random.Random] = None) -> int:
    """A negative `first` means draw the opening seat at random."""
    if first >= player_count:
        raise ValueError(f"First seat must be below {player_count}, got {first}.")
    if first < 0:
        return (rng or random).randrange(player_count)
    return first


def prompt_board_size(read: Reader = input) -> int:
    return parse_size(read("Input board size: "))


def prompt_players(read: Reader = input) -> List[Player]:
    (c1, s1, n1), (c2, s2, n2) = PLAYER_ONE, PLAYER_TWO

    answer = read("Would you like to choose your names and colours? ")
    if answer.strip().lower() == "yes":
        n1 = read("Player 1 name: ").strip()
        c1 = read("Player 1 colour: ").strip()
        n2 = read("Player 2 name: ").strip()
        c2 = read("Player 2 colour: ").strip()

    return [
        new_player(colour=c1, symbol=s1, name=n1),
        new_player(colour=c2, symbol=s2, name=n2),
    ]

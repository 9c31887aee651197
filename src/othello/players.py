# src/othello/players.py

from __future__ import annotations
from dataclasses import dataclass

from othello.config import DEFAULT_COLOUR, DEFAULT_NAME, DEFAULT_SYMBOL


@dataclass(frozen=True, slots=True)
class Player:
    colour: str
    symbol: str
    name: str


def new_player(colour: str, symbol: str, name: str) -> Player:
    """
    Build a player record, filling blank fields with the configured defaults.
    """
    if len(colour) < 1:
        colour = DEFAULT_COLOUR
    if len(symbol) < 1:
        symbol = DEFAULT_SYMBOL
    if len(name) < 1:
        name = DEFAULT_NAME
    return Player(colour=colour, symbol=symbol, name=name)

# src/othello/config.py

from __future__ import annotations

MIN_SIZE = 4
MAX_SIZE = 26
DEFAULT_SIZE = 8

# Control tokens typed at the move prompt
QUIT_TOKEN = "quit"
SKIP_TOKEN = "skip"

# Fallbacks applied when a player leaves a field blank
DEFAULT_COLOUR = "red"
DEFAULT_SYMBOL = "R"
DEFAULT_NAME = "FakePlayer"

# Built-in players: (colour, symbol, name)
PLAYER_ONE = ("white", "O", "White")
PLAYER_TWO = ("black", "X", "Black")
PLAYER_COUNT = 2

# Seat that moves first; negative means pick at random
FIRST_SEAT = 0

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True
SHOW_HINTS = False

LOG_LEVEL = "WARNING"

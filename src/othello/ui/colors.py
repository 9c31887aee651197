from __future__ import annotations
from othello import config

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"

FG_RED = "\033[31m"
FG_GREEN = "\033[32m"
FG_YELLOW = "\033[33m"
FG_BLUE = "\033[34m"
FG_MAGENTA = "\033[35m"
FG_CYAN = "\033[36m"
FG_WHITE = "\033[97m"
FG_BLACK = "\033[30;47m"  # black on light background so it stays visible
FG_GRAY = "\033[90m"

# Player colour labels understood by the renderer
NAMED = {
    "red": FG_RED,
    "green": FG_GREEN,
    "yellow": FG_YELLOW,
    "blue": FG_BLUE,
    "magenta": FG_MAGENTA,
    "cyan": FG_CYAN,
    "white": FG_WHITE,
    "black": FG_BLACK,
}


def c(s: str, code: str) -> str:
    if not config.USE_COLOR:
        return s
    return f"{code}{s}{RESET}"


def named(s: str, colour: str) -> str:
    code = NAMED.get(colour.strip().lower())
    if code is None:
        return s
    return c(s, code)

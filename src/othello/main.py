from __future__ import annotations

import argparse
import logging

from othello import config
from othello.ui.menu import run_menu


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play Othello in the terminal.")
    ap.add_argument("--size", type=int, default=None, help="Board size (even, 4-26). Prompted for if omitted.")
    ap.add_argument("--first", type=int, default=config.FIRST_SEAT, help="Seat that moves first (negative = random)")
    ap.add_argument("--hints", action="store_true", help="Mark legal moves on the board")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns")
    ap.add_argument("--log-level", type=str, default=config.LOG_LEVEL, help="Logging level (DEBUG, INFO, WARNING, ...)")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    if args.first >= config.PLAYER_COUNT:
        ap.error(f"--first must be below {config.PLAYER_COUNT} (negative picks at random)")

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False

    run_menu(size=args.size, first=args.first, show_hints=args.hints or config.SHOW_HINTS)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

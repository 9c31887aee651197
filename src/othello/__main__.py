from __future__ import annotations

from othello.main import main

if __name__ == "__main__":
    raise SystemExit(main())

"""Entry point for the terminal snake game."""

from __future__ import annotations

import sys

from termsnake.app import main

if __name__ == "__main__":
    sys.exit(main())

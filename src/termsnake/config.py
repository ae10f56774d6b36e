"""Centralized configuration for the terminal snake game."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def _default_data_dir() -> Path:
    """Return a platform-appropriate user data directory for logs."""

    if sys.platform.startswith("win"):
        base = Path(os.getenv("LOCALAPPDATA") or Path.home() / "AppData" / "Local")
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.getenv("XDG_DATA_HOME") or Path.home() / ".local" / "share")
    return base / "termsnake"


DATA_DIR = Path(os.getenv("TERMSNAKE_DATA_DIR") or _default_data_dir())
LOG_FILE = Path(os.getenv("TERMSNAKE_LOG_FILE") or DATA_DIR / "termsnake.log")
LOG_LEVEL: str = os.getenv("TERMSNAKE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

FRONTEND: str = os.getenv("TERMSNAKE_FRONTEND", "terminal").lower()

BOARD_WIDTH: int = 20
BOARD_HEIGHT: int = 20
UNIT_TICK_MS: int = 200  # one grid cell every 200 ms
INITIAL_LENGTH: int = 4

FPS: int = 60
GAME_OVER_PAUSE_MS: int = 500

# Above this share of occupied cells, item placement stops sampling blindly.
PLACEMENT_SAMPLING_LIMIT: float = 0.5

DIRECTIONS: dict[str, tuple[int, int]] = {
    "UP": (0, -1),
    "DOWN": (0, 1),
    "LEFT": (-1, 0),
    "RIGHT": (1, 0),
}
START_DIRECTION: str = "UP"

"""Application entry: logging setup, frontend selection, exit status."""

from __future__ import annotations

import logging
import random
import sys
from typing import Callable

from .config import FRONTEND, LOG_FILE, LOG_FORMAT, LOG_LEVEL
from .session import GameSession

logger = logging.getLogger(__name__)

Frontend = Callable[[GameSession], int]


def configure_logging() -> None:
    """Send logs to the log file; the terminal belongs to the game."""
    try:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            filename=str(LOG_FILE),
            level=LOG_LEVEL,
            format=LOG_FORMAT,
        )
    except (OSError, ValueError):
        logging.getLogger().addHandler(logging.NullHandler())


def _terminal_frontend() -> Frontend:
    from .terminal import run_terminal

    return run_terminal


def _window_frontend() -> Frontend:
    from .window import run_window

    return run_window


FRONTENDS: dict[str, Callable[[], Frontend]] = {
    "terminal": _terminal_frontend,
    "window": _window_frontend,
}


def main(frontend: str = FRONTEND) -> int:
    configure_logging()

    loader = FRONTENDS.get(frontend)
    if loader is None:
        print(
            f"Unknown frontend {frontend!r}; choose one of: {', '.join(FRONTENDS)}",
            file=sys.stderr,
        )
        return 2

    logger.info("Starting %s frontend", frontend)
    session = GameSession.new(rng=random.Random())
    final_score = loader()(session)
    logger.info("Session finished with score %d", final_score)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Input commands shared by every frontend."""

from __future__ import annotations

import logging
from enum import Enum

from .session import GameSession

logger = logging.getLogger(__name__)


class Command(Enum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    QUIT = "quit"


COMMAND_TO_DIRECTION: dict[Command, str] = {
    Command.LEFT: "LEFT",
    Command.RIGHT: "RIGHT",
    Command.UP: "UP",
    Command.DOWN: "DOWN",
}


def apply_command(session: GameSession, command: Command) -> bool:
    """Apply one polled command. Returns False when the player asked to quit.

    Quitting leaves the game state untouched; it is not a losing move.
    """

    if command is Command.QUIT:
        logger.info("Quit requested at score %d", session.score)
        return False
    direction = COMMAND_TO_DIRECTION.get(command)
    if direction is not None:
        session.set_direction(direction)
    return True

"""Fixed-step tick engine decoupling game speed from the polling rate."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from .chain import SegmentChain
from .collision import collides_with_self, collides_with_wall
from .config import DIRECTIONS, UNIT_TICK_MS

logger = logging.getLogger(__name__)


class TickOutcome(Enum):
    ALIVE = "alive"
    DEAD = "dead"


class TickEngine:
    """Accumulates elapsed time and moves the chain once per threshold.

    ``DEAD`` is terminal: after a collision every later call returns it
    without touching the chain.
    """

    def __init__(
        self, width: int, height: int, threshold_ms: int = UNIT_TICK_MS
    ) -> None:
        if threshold_ms <= 0:
            raise ValueError("tick threshold must be positive")
        self.width = width
        self.height = height
        self.threshold_ms = threshold_ms
        self.accumulated_ms = 0
        self.outcome = TickOutcome.ALIVE
        self.death_cause: str | None = None

    def tick(
        self,
        chain: SegmentChain,
        direction: str,
        elapsed_ms: int,
        on_step: Callable[[], None] | None = None,
    ) -> TickOutcome:
        """Feed ``elapsed_ms`` and run every movement step that became due."""
        if self.outcome is TickOutcome.DEAD:
            return self.outcome
        if elapsed_ms < 0:
            logger.debug("Ignoring negative elapsed time %s ms", elapsed_ms)
            elapsed_ms = 0

        self.accumulated_ms += elapsed_ms
        dx, dy = DIRECTIONS[direction]
        while self.accumulated_ms > self.threshold_ms:
            self.accumulated_ms -= self.threshold_ms

            head_x, head_y = chain.head_position()
            candidate = (head_x + dx, head_y + dy)
            if collides_with_wall(candidate, self.width, self.height):
                return self._die("wall", candidate)
            if collides_with_self(candidate, chain):
                return self._die("self", candidate)

            chain.advance(candidate)
            if on_step is not None:
                on_step()
        return self.outcome

    def _die(self, cause: str, candidate: tuple[int, int]) -> TickOutcome:
        self.outcome = TickOutcome.DEAD
        self.death_cause = cause
        logger.info("Collision with %s at %s", cause, candidate)
        return self.outcome

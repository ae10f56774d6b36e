"""Game session: one owned value holding all mutable state of a match."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .chain import Position, SegmentChain
from .collision import collides_with_item
from .config import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    DIRECTIONS,
    INITIAL_LENGTH,
    START_DIRECTION,
    UNIT_TICK_MS,
)
from .engine import TickEngine, TickOutcome
from .placement import place_item

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Read-only view handed to renderers once per frame."""

    width: int
    height: int
    segments: tuple[Position, ...]
    item: Position | None
    score: int
    outcome: TickOutcome


class GameSession:
    """Composes chain, tick engine and item placement; owns direction and score."""

    def __init__(
        self,
        chain: SegmentChain,
        *,
        width: int = BOARD_WIDTH,
        height: int = BOARD_HEIGHT,
        direction: str = START_DIRECTION,
        rng: random.Random | None = None,
        item: Position | None = None,
        threshold_ms: int = UNIT_TICK_MS,
    ) -> None:
        if direction not in DIRECTIONS:
            raise ValueError(f"unknown direction {direction!r}")
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self._chain = chain
        self._direction = direction
        self._score = len(chain)
        self._engine = TickEngine(width, height, threshold_ms)
        if item is None:
            item = place_item(chain, width, height, self.rng)
        self._item = item

    @classmethod
    def new(
        cls,
        width: int = BOARD_WIDTH,
        height: int = BOARD_HEIGHT,
        rng: random.Random | None = None,
    ) -> "GameSession":
        """Spawn the snake at the board centre, stacked downward, heading up."""
        start_x, start_y = width // 2, height // 2
        chain = SegmentChain(
            (start_x, start_y + offset) for offset in range(INITIAL_LENGTH)
        )
        session = cls(chain, width=width, height=height, rng=rng)
        logger.info(
            "New session on %dx%d board, item at %s", width, height, session.item
        )
        return session

    # --- Read-only state ----------------------------------------------

    @property
    def chain(self) -> SegmentChain:
        return self._chain

    @property
    def direction(self) -> str:
        return self._direction

    @property
    def item(self) -> Position | None:
        return self._item

    @property
    def score(self) -> int:
        return self._score

    @property
    def outcome(self) -> TickOutcome:
        return self._engine.outcome

    @property
    def death_cause(self) -> str | None:
        return self._engine.death_cause

    @property
    def accumulated_ms(self) -> int:
        return self._engine.accumulated_ms

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            width=self.width,
            height=self.height,
            segments=self._chain.positions(),
            item=self._item,
            score=self._score,
            outcome=self.outcome,
        )

    # --- Commands -----------------------------------------------------

    def set_direction(self, direction: str) -> None:
        """Overwrite the heading; a 180 degree turn is not rejected."""
        if direction not in DIRECTIONS:
            raise ValueError(f"unknown direction {direction!r}")
        self._direction = direction

    def tick(self, elapsed_ms: int) -> TickOutcome:
        was_alive = self.outcome is TickOutcome.ALIVE
        outcome = self._engine.tick(
            self._chain, self._direction, elapsed_ms, on_step=self._check_item
        )
        if was_alive and outcome is TickOutcome.DEAD:
            logger.info(
                "Game over (%s collision), final score %d",
                self._engine.death_cause,
                self._score,
            )
        return outcome

    def on_item_eaten(self) -> None:
        self._chain.grow()
        self._score += 1
        self._item = place_item(self._chain, self.width, self.height, self.rng)
        logger.debug("Item eaten, score %d, next item at %s", self._score, self._item)

    def _check_item(self) -> None:
        if collides_with_item(self._chain.head_position(), self._item):
            self.on_item_eaten()

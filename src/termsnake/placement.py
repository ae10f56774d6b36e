"""Item placement on free grid cells."""

from __future__ import annotations

import logging
import random

from .chain import Position, SegmentChain
from .collision import collides_with_self
from .config import PLACEMENT_SAMPLING_LIMIT

logger = logging.getLogger(__name__)


def _free_cells(chain: SegmentChain, width: int, height: int) -> list[Position]:
    occupied = set(chain)
    return [
        (x, y)
        for y in range(height)
        for x in range(width)
        if (x, y) not in occupied
    ]


def place_item(
    chain: SegmentChain,
    width: int,
    height: int,
    rng: random.Random,
) -> Position | None:
    """Pick a uniformly random cell not covered by the chain.

    Sparse boards are sampled directly. Once the chain covers more than
    ``PLACEMENT_SAMPLING_LIMIT`` of the grid the free cells are enumerated
    instead, so placement always terminates. Returns None when the chain
    fills the whole board.
    """

    area = width * height
    if len(chain) <= area * PLACEMENT_SAMPLING_LIMIT:
        while True:
            pos = (rng.randrange(width), rng.randrange(height))
            if not collides_with_self(pos, chain):
                return pos

    free = _free_cells(chain, width, height)
    if not free:
        logger.info("Board is full (%d cells), no item placed", area)
        return None
    logger.debug("Placing item among %d free cells", len(free))
    return rng.choice(free)

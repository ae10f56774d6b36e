"""Side-effect free collision queries used by the tick engine and session."""

from __future__ import annotations

from .chain import Position, SegmentChain


def collides_with_self(candidate: Position, chain: SegmentChain) -> bool:
    """True when ``candidate`` is occupied by any segment of the current chain.

    The check runs against the chain before it moves, tail included.
    """

    return chain.contains_position(candidate)


def collides_with_wall(candidate: Position, width: int, height: int) -> bool:
    x, y = candidate
    return not (0 <= x < width and 0 <= y < height)


def collides_with_item(position: Position, item: Position | None) -> bool:
    return item is not None and position == item

"""Segment chain: the snake body as a head-first list of grid cells."""

from __future__ import annotations

from typing import Iterable, Iterator

Position = tuple[int, int]


class SegmentChain:
    """Ordered, append-only sequence of positions, head at index 0.

    The chain never shrinks. ``advance`` shifts every segment into the cell
    its predecessor held, and ``grow`` appends a segment stacked on the tail
    that gets pulled into place by the next ``advance``.
    """

    __slots__ = ("_segments",)

    def __init__(self, positions: Iterable[Position]) -> None:
        segments = [(int(x), int(y)) for x, y in positions]
        if not segments:
            raise ValueError("a segment chain needs at least one position")
        if len(set(segments)) != len(segments):
            raise ValueError("segment positions must be unique")
        self._segments: list[Position] = segments

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._segments)

    def __repr__(self) -> str:
        return f"SegmentChain({self._segments!r})"

    def head_position(self) -> Position:
        return self._segments[0]

    def tail_position(self) -> Position:
        return self._segments[-1]

    def positions(self) -> tuple[Position, ...]:
        """Return a head-first snapshot safe to hand to renderers."""
        return tuple(self._segments)

    def contains_position(self, position: Position) -> bool:
        return position in self._segments

    def advance(self, new_head: Position) -> None:
        """Move the head to ``new_head`` and shift the body one cell along."""
        segments = self._segments
        previous = segments[0]
        segments[0] = new_head
        for idx in range(1, len(segments)):
            segments[idx], previous = previous, segments[idx]

    def grow(self) -> None:
        """Append one segment on top of the current tail."""
        self._segments.append(self._segments[-1])

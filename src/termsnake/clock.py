"""Wall-clock source of per-frame elapsed milliseconds."""

from __future__ import annotations

import time
from typing import Callable


class FrameClock:
    """Reports whole milliseconds since the previous ``tick`` call.

    Fractions of a millisecond are carried over to the next frame so that a
    fast loop does not slowly lose time to rounding.
    """

    def __init__(self, time_source: Callable[[], float] = time.monotonic) -> None:
        self._time_source = time_source
        self._last = time_source()
        self._carry = 0.0

    def tick(self) -> int:
        now = self._time_source()
        elapsed = max(0.0, now - self._last) * 1000.0 + self._carry
        self._last = now
        whole = int(elapsed)
        self._carry = elapsed - whole
        return whole

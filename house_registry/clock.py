"""Time and identifier sources for the house store."""

import time
from typing import Callable


class Clock:
    """Monotonic wall clock in nanoseconds since the epoch.

    Parameters
    ----------
    source : Callable[[], int] | None
        Raw time source; defaults to ``time.time_ns``. Tests inject a
        deterministic counter here.
    """

    def __init__(self, source: Callable[[], int] | None = None) -> None:
        self._source = source or time.time_ns
        self._last = 0

    def now(self) -> int:
        """Return the current time, never lower than a previous reading."""
        self._last = max(self._last, self._source())
        return self._last


class IdAllocator:
    """Hands out house ids 1, 2, 3, ... for the lifetime of a store."""

    def __init__(self, start: int = 0) -> None:
        self._current = start

    def next(self) -> int:
        """Allocate the next id."""
        self._current += 1
        return self._current

    def peek(self) -> int:
        """Last id handed out (0 when none)."""
        return self._current

"""Clock implementations."""

import time


class SystemClock:
    """Wall-clock time, floored to whole seconds.

    Readings before the epoch, or a clock that cannot be read at all,
    fall back to 0.
    """

    def seconds(self) -> int:
        try:
            now = int(time.time())
        except (OSError, OverflowError, ValueError):
            return 0
        return max(now, 0)


class FixedClock:
    """Clock frozen at a given instant (for tests and reproducible runs)."""

    def __init__(self, seconds: int = 0):
        self._seconds = max(int(seconds), 0)

    def seconds(self) -> int:
        return self._seconds

"""Protocol for time sources used when synthesizing delimiter lines."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Source of the current time as whole seconds since the 1970 epoch.

    Implementations must not raise; an unreadable clock reports 0.
    """

    def seconds(self) -> int:
        """Return seconds elapsed since the epoch."""
        ...

"""Message framing for mbox archives."""

from emlbox.framing.clock import FixedClock, SystemClock
from emlbox.framing.framer import FROM_PREFIX, Framer, frame, from_line, has_from_line

__all__ = [
    "FROM_PREFIX",
    "FixedClock",
    "Framer",
    "SystemClock",
    "frame",
    "from_line",
    "has_from_line",
]

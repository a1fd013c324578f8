"""Delimiter synthesis and per-message framing.

The calendar fields of the synthesized ``From`` line come from fixed-width
approximations (31-day months of 2,628,000 seconds, 365-day years, and a
weekday table indexed straight from the day count). Archives written by
earlier tools carry lines built this way, so the formulas are kept as is.
"""

from typing import Optional

from emlbox.framing.clock import SystemClock
from emlbox.protocols import Clock

FROM_PREFIX = b"From "

DAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

SECONDS_PER_DAY = 86_400
SECONDS_PER_MONTH = 2_628_000
SECONDS_PER_YEAR = 31_536_000


def from_line(seconds: int) -> bytes:
    """Build the mbox delimiter line for a moment in time.

    Args:
        seconds: Seconds since the 1970 epoch; negative values count as 0

    Returns:
        A single newline-terminated ``From MAILER-DAEMON ...`` line
    """
    s = max(int(seconds), 0)
    days = s // SECONDS_PER_DAY

    day_of_week = DAYS[days % 7]
    month = MONTHS[(s // SECONDS_PER_MONTH) % 12]
    day = days % 31 + 1
    hour = (s // 3600) % 24
    minute = (s // 60) % 60
    second = s % 60
    year = 1970 + s // SECONDS_PER_YEAR

    return (
        f"From MAILER-DAEMON {day_of_week} {month} {day} "
        f"{hour:02d}:{minute:02d}:{second:02d} {year}\n"
    ).encode("ascii")


def has_from_line(content: bytes) -> bool:
    """Check if the content already opens with an mbox delimiter."""
    return content.startswith(FROM_PREFIX)


def frame(content: bytes, clock: Optional[Clock] = None) -> bytes:
    """Frame one message for storage in an mbox archive.

    Prepends a synthesized delimiter unless the content already starts with
    ``From ``, and normalizes the tail to exactly one ``\\n``.

    Args:
        content: Raw message bytes
        clock: Time source for the delimiter (defaults to the system clock)

    Returns:
        The framed message bytes
    """
    # The delimiter's own newline terminates an empty message.
    body = content.rstrip(b"\n") + b"\n" if content else b""
    if has_from_line(content):
        return body

    clock = clock or SystemClock()
    return from_line(clock.seconds()) + body


class Framer:
    """Frames messages against a fixed clock instance.

    Stateless apart from the clock, so one instance is safe to share
    across worker threads.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self.clock: Clock = clock or SystemClock()

    def frame(self, content: bytes) -> bytes:
        """Frame raw message bytes (see :func:`frame`)."""
        return frame(content, self.clock)

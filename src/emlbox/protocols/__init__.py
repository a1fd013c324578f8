"""Protocol definitions for extensible components."""

from emlbox.protocols.clock import Clock
from emlbox.protocols.ingester import MessageSource

__all__ = ["Clock", "MessageSource"]

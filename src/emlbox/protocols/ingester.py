"""Protocol for input source handlers."""

from pathlib import Path
from typing import Protocol, runtime_checkable

from emlbox.models import Batch


@runtime_checkable
class MessageSource(Protocol):
    """Protocol for input source handlers.

    Implementations turn an input path (a single file, a folder) into the
    ordered batch of message files to convert.
    Uses structural subtyping - no inheritance required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this source type (e.g., 'file', 'folder')."""
        ...

    def can_handle(self, source: Path) -> bool:
        """Check if this source can process the given path."""
        ...

    def discover(self, source: Path) -> Batch:
        """Return the message files found at the path, in processing order."""
        ...

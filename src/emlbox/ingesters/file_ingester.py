"""Ingester for a single message file."""

from pathlib import Path

from emlbox.config import DEFAULT_OPTIONS, ConvertOptions
from emlbox.models import Batch


class FileIngester:
    """Ingester for one message file with the input extension."""

    source_type = "file"

    def __init__(self, options: ConvertOptions = DEFAULT_OPTIONS):
        self.options = options

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing file with the input extension."""
        return source.is_file() and source.suffix == self.options.suffix

    def discover(self, source: Path) -> Batch:
        return Batch(paths=(source,))

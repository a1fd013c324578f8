"""Ingester for local folders."""

import logging
import os
from pathlib import Path

from emlbox.config import DEFAULT_OPTIONS, ConvertOptions
from emlbox.models import Batch

logger = logging.getLogger(__name__)


class FolderIngester:
    """Ingester for a flat folder of message files."""

    source_type = "folder"

    def __init__(self, options: ConvertOptions = DEFAULT_OPTIONS):
        self.options = options

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing directory."""
        return source.is_dir()

    def discover(self, source: Path) -> Batch:
        """Collect message files directly inside a folder.

        Only regular files whose suffix matches the input extension exactly
        (case-sensitive) are kept. Subdirectories are not descended into.
        The order is whatever the filesystem reports; it is not sorted.

        Args:
            source: Path to the folder

        Returns:
            Batch of matching file paths
        """
        paths = []
        skipped = 0
        with os.scandir(source) as entries:
            for entry in entries:
                if self._is_message_file(entry):
                    paths.append(Path(entry.path))
                else:
                    skipped += 1

        logger.debug(f"Discovered {len(paths)} message files in {source} ({skipped} skipped)")
        return Batch(paths=tuple(paths))

    def _is_message_file(self, entry: os.DirEntry) -> bool:
        if os.path.splitext(entry.name)[1] != self.options.suffix:
            return False
        try:
            return entry.is_file()
        except OSError:
            return False

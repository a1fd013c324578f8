"""Archive storage for emlbox."""

from emlbox.storage.archive import ArchiveWriter

__all__ = ["ArchiveWriter"]

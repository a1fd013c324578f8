"""Buffered writer for mbox archive files."""

import logging
import os
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, Optional

from emlbox.config import DEFAULT_OPTIONS, ConvertOptions

logger = logging.getLogger(__name__)


class ArchiveWriter:
    """Buffered byte sink over the destination archive.

    The writer is the only owner of the file handle for the length of a
    run. Leaving the ``with`` block flushes the buffer, fsyncs and closes
    the file, whether the block exited normally or by an exception.
    """

    def __init__(self, path: Path | str, append: bool, buffer_size: int):
        self.path = Path(path)
        self.append = append
        self.buffer_size = buffer_size
        self._file: Optional[BinaryIO] = None
        self._messages = 0
        self._bytes_written = 0

    @classmethod
    def appending(
        cls, path: Path | str, options: ConvertOptions = DEFAULT_OPTIONS
    ) -> "ArchiveWriter":
        """Writer that creates the archive or appends to it (small buffer)."""
        return cls(path, append=True, buffer_size=options.append_buffer_size)

    @classmethod
    def truncating(
        cls, path: Path | str, options: ConvertOptions = DEFAULT_OPTIONS
    ) -> "ArchiveWriter":
        """Writer that creates the archive or discards its content (large buffer)."""
        return cls(path, append=False, buffer_size=options.batch_buffer_size)

    @property
    def messages(self) -> int:
        """Number of framed messages written so far."""
        return self._messages

    @property
    def bytes_written(self) -> int:
        return self._bytes_written

    def open(self) -> None:
        """Open the destination file."""
        if self._file is not None:
            raise RuntimeError(f"Archive already open: {self.path}")
        mode = "ab" if self.append else "wb"
        self._file = open(self.path, mode, buffering=self.buffer_size)
        logger.debug(
            f"Opened {self.path} ({'append' if self.append else 'truncate'}, "
            f"{self.buffer_size} byte buffer)"
        )

    def write(self, framed: bytes) -> None:
        """Write one framed message."""
        if self._file is None:
            raise RuntimeError("Archive is not open")
        self._file.write(framed)
        self._messages += 1
        self._bytes_written += len(framed)

    def close(self) -> None:
        """Flush to stable storage and release the file."""
        if self._file is None:
            return
        f, self._file = self._file, None
        try:
            f.flush()
            os.fsync(f.fileno())
        finally:
            f.close()

    def __enter__(self) -> "ArchiveWriter":
        self.open()
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

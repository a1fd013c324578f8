"""Core data models for messages and batches."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional


@dataclass(frozen=True)
class Message:
    """Raw bytes of one input file. Never parsed."""

    path: Path
    content: bytes

    @classmethod
    def read(cls, path: Path) -> "Message":
        """Load a message file fully into memory."""
        return cls(path=path, content=path.read_bytes())


@dataclass(frozen=True)
class Batch:
    """Input files of a directory run, in discovery order."""

    paths: tuple[Path, ...]

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.paths)

    def chunks(self, size: int) -> Iterator[tuple[Path, ...]]:
        """Yield contiguous slices of at most ``size`` paths.

        Args:
            size: Maximum number of paths per chunk

        Yields:
            Tuples of paths, in batch order
        """
        if size <= 0:
            raise ValueError(f"chunk size must be positive, got {size}")
        for start in range(0, len(self.paths), size):
            yield self.paths[start : start + size]


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a finished conversion run."""

    count: int
    destination: Path
    bytes_written: int = 0


@dataclass(frozen=True)
class ConversionProgress:
    """Snapshot sent to progress callbacks after each written chunk."""

    processed: int
    total: int
    current: Optional[Path] = None

    @property
    def fraction(self) -> float:
        if self.total == 0:
            return 0.0
        return self.processed / self.total

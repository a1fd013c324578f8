"""Tunable settings for conversion runs."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ConvertOptions:
    """Settings shared by the single-file and batch converters.

    Chunk size bounds peak memory to roughly chunk_size times the average
    message size. The two buffer sizes match the two write patterns: one
    small append per single-file run, a long stream of writes per batch.
    """

    extension: str = "eml"
    output_name: str = "output.mbox"
    chunk_size: int = 100
    workers: Optional[int] = None
    progress_threshold: int = 1000
    progress_every: int = 1000
    append_buffer_size: int = 64 * 1024
    batch_buffer_size: int = 1024 * 1024

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        if self.workers is not None and self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")
        if self.progress_every <= 0:
            raise ValueError(f"progress_every must be positive, got {self.progress_every}")
        if self.append_buffer_size <= 0 or self.batch_buffer_size <= 0:
            raise ValueError("buffer sizes must be positive")

    @property
    def suffix(self) -> str:
        """File suffix including the dot, e.g. ``.eml``."""
        return f".{self.extension}"


DEFAULT_OPTIONS = ConvertOptions()

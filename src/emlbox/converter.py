"""Conversion engine: frame message files and write them to an mbox archive."""

import logging
from concurrent.futures import Executor, ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, Optional

from emlbox.config import DEFAULT_OPTIONS, ConvertOptions
from emlbox.errors import InvalidPathError, NoEmlFilesError
from emlbox.framing import Framer
from emlbox.ingesters import FolderIngester, get_ingester
from emlbox.models import Batch, ConversionProgress, ConversionResult, Message
from emlbox.storage import ArchiveWriter

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ConversionProgress], None]


class MboxConverter:
    """Converts .eml files into an mbox archive.

    Single files are appended to the archive; folders replace it. Folder
    runs read and frame files in parallel one chunk at a time, then write
    the chunk on the calling thread in discovery order. The first failing
    file aborts the run.
    """

    def __init__(
        self,
        options: ConvertOptions = DEFAULT_OPTIONS,
        framer: Optional[Framer] = None,
    ):
        self.options = options
        self.framer = framer or Framer()

    def destination(self, output_dir: Path | str) -> Path:
        """Path of the archive inside an output folder."""
        return Path(output_dir) / self.options.output_name

    def convert_one(self, input_path: Path | str, output_dir: Path | str) -> ConversionResult:
        """Append one message file to the archive.

        Args:
            input_path: Path to the .eml file
            output_dir: Folder holding the archive

        Returns:
            ConversionResult with a count of 1
        """
        dest_path = self.destination(output_dir)

        with ArchiveWriter.appending(dest_path, self.options) as writer:
            message = Message.read(Path(input_path))
            writer.write(self.framer.frame(message.content))

        logger.info(f"Successfully converted {writer.messages} email to mbox format")
        logger.info(f"Output saved to {dest_path}")
        return ConversionResult(
            count=writer.messages, destination=dest_path, bytes_written=writer.bytes_written
        )

    def convert_many(
        self,
        input_dir: Path | str,
        output_dir: Path | str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ConversionResult:
        """Write every .eml file of a folder into a fresh archive.

        Args:
            input_dir: Folder with message files
            output_dir: Folder holding the archive
            on_progress: Called after each chunk is written

        Returns:
            ConversionResult with the number of messages written

        Raises:
            NoEmlFilesError: If the folder holds no matching file; the
                archive is not created or touched in that case
            OSError: On the first read or write failure
        """
        batch = FolderIngester(self.options).discover(Path(input_dir))
        return self.write_batch(batch, output_dir, on_progress)

    def write_batch(
        self,
        batch: Batch,
        output_dir: Path | str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ConversionResult:
        """Replace the archive with the framed messages of a batch, in order."""
        dest_path = self.destination(output_dir)
        total = len(batch)

        if total == 0:
            raise NoEmlFilesError(f"No .{self.options.extension} files found in the provided directory")

        large = total > self.options.progress_threshold
        if large:
            logger.info(f"Starting conversion of {total} email files...")

        processed = 0
        with ArchiveWriter.truncating(dest_path, self.options) as writer:
            with ThreadPoolExecutor(max_workers=self.options.workers) as executor:
                for chunk in batch.chunks(self.options.chunk_size):
                    for framed in self._frame_chunk(executor, chunk):
                        writer.write(framed)

                    previous, processed = processed, writer.messages
                    logger.debug(f"Wrote chunk of {len(chunk)} files ({processed}/{total})")

                    every = self.options.progress_every
                    if large and processed // every > previous // every:
                        logger.info(f"Progress: {processed}/{total} files processed")
                    if on_progress is not None:
                        on_progress(ConversionProgress(processed, total, chunk[-1]))

        logger.info(f"Successfully converted {writer.messages} email(s) to mbox format")
        logger.info(f"Output saved to {dest_path}")
        return ConversionResult(
            count=writer.messages, destination=dest_path, bytes_written=writer.bytes_written
        )

    def convert_path(
        self,
        input_path: Path | str,
        output_dir: Path | str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ConversionResult:
        """Convert a file or folder, picking the mode from the input path.

        The input is validated before anything is read or created; the
        output folder is then created if missing.
        """
        source = Path(input_path).absolute()
        output = Path(output_dir).absolute()

        ingester = get_ingester(source, self.options)
        if ingester is None:
            if source.is_file():
                raise InvalidPathError(f"Provided file is not an .{self.options.extension} file")
            raise InvalidPathError(f"Provide a folder or an {self.options.extension} file")

        batch = ingester.discover(source)
        output.mkdir(parents=True, exist_ok=True)

        if ingester.source_type == "folder":
            return self.write_batch(batch, output, on_progress)

        result = self.convert_one(batch.paths[0], output)
        if on_progress is not None:
            on_progress(ConversionProgress(result.count, len(batch), batch.paths[0]))
        return result

    def _read_and_frame(self, path: Path) -> bytes:
        return self.framer.frame(Message.read(path).content)

    def _frame_chunk(self, executor: Executor, chunk: tuple[Path, ...]) -> list[bytes]:
        """Read and frame a chunk in parallel, keeping input order.

        Results land in slots indexed by position, so completion order does
        not matter. On the first failure the remaining tasks are cancelled
        and the error is re-raised.
        """
        slots: list[Optional[bytes]] = [None] * len(chunk)
        futures = {executor.submit(self._read_and_frame, path): i for i, path in enumerate(chunk)}
        try:
            for future in as_completed(futures):
                slots[futures[future]] = future.result()
        except BaseException:
            for future in futures:
                future.cancel()
            raise
        return [framed for framed in slots if framed is not None]


def convert_one(
    input_path: Path | str,
    output_dir: Path | str,
    options: ConvertOptions = DEFAULT_OPTIONS,
) -> ConversionResult:
    """Append one .eml file to ``output_dir/output.mbox``."""
    return MboxConverter(options).convert_one(input_path, output_dir)


def convert_many(
    input_dir: Path | str,
    output_dir: Path | str,
    options: ConvertOptions = DEFAULT_OPTIONS,
    on_progress: Optional[ProgressCallback] = None,
) -> ConversionResult:
    """Replace ``output_dir/output.mbox`` with every .eml file of a folder."""
    return MboxConverter(options).convert_many(input_dir, output_dir, on_progress)


def convert_path(
    input_path: Path | str,
    output_dir: Path | str,
    options: ConvertOptions = DEFAULT_OPTIONS,
    on_progress: Optional[ProgressCallback] = None,
) -> ConversionResult:
    """Convert a file or folder into ``output_dir/output.mbox``."""
    return MboxConverter(options).convert_path(input_path, output_dir, on_progress)

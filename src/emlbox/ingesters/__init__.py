"""Input source handlers (ingesters) for emlbox."""

from pathlib import Path
from typing import Optional

from emlbox.config import DEFAULT_OPTIONS, ConvertOptions
from emlbox.ingesters.file_ingester import FileIngester
from emlbox.ingesters.folder_ingester import FolderIngester
from emlbox.protocols import MessageSource


def get_ingester(
    source: Path | str, options: ConvertOptions = DEFAULT_OPTIONS
) -> Optional[MessageSource]:
    """Find an ingester that can handle the given source.

    Args:
        source: Path to the input source (folder or message file)
        options: Conversion settings; supplies the input extension

    Returns:
        A MessageSource instance that can handle the source, or None
    """
    source_path = Path(source)
    ingesters: list[MessageSource] = [
        FileIngester(options),
        FolderIngester(options),
    ]
    for ingester in ingesters:
        if ingester.can_handle(source_path):
            return ingester
    return None


__all__ = ["get_ingester", "FileIngester", "FolderIngester"]

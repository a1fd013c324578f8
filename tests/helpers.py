import os
import re
from pathlib import Path

FIXED_SECONDS = 1_700_000_000

_DELIMITER = re.compile(rb"^From MAILER-DAEMON ", re.MULTILINE)


def write_eml(folder: Path, name: str, body: str | bytes) -> Path:
    path = folder / name
    path.write_bytes(body.encode() if isinstance(body, str) else body)
    return path


def listed_emls(folder: Path) -> list[str]:
    """Names of .eml files in the order the filesystem lists them."""
    return [name for name in os.listdir(folder) if name.endswith(".eml")]


def split_archive(data: bytes) -> list[bytes]:
    """Split an archive into messages at synthesized delimiter lines."""
    starts = [m.start() for m in _DELIMITER.finditer(data)]
    return [data[a:b] for a, b in zip(starts, starts[1:] + [len(data)])]

import logging
from pathlib import Path

import pytest

from emlbox.framing import FixedClock, Framer

from tests.helpers import FIXED_SECONDS


@pytest.fixture
def fixed_framer() -> Framer:
    return Framer(FixedClock(FIXED_SECONDS))


@pytest.fixture
def inbox(tmp_path: Path) -> Path:
    folder = tmp_path / "inbox"
    folder.mkdir()
    return folder


@pytest.fixture
def outdir(tmp_path: Path) -> Path:
    folder = tmp_path / "out"
    folder.mkdir()
    return folder


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    package_logger = logging.getLogger("emlbox")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)

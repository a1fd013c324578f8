"""CLI entry point for emlbox."""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from emlbox import __version__
from emlbox.config import DEFAULT_OPTIONS, ConvertOptions
from emlbox.converter import convert_path
from emlbox.errors import ConversionError

logger = logging.getLogger(__name__)

BANNER = r"""
  ___ __  __ _      _
 | __|  \/  | |    | |__  _____ __
 | _|| |\/| | |__  | '_ \/ _ \ \ /
 |___|_|  |_|____| |_.__/\___/_\_\

 Convert your eml files into an mbox archive.
"""


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def configure_logging(verbose: bool = False) -> None:
    """Send progress to stdout and warnings/errors to stderr.

    Args:
        verbose: Log per-chunk DEBUG detail as well
    """
    package_logger = logging.getLogger("emlbox")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    formatter = logging.Formatter("%(message)s")

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    stdout_handler.addFilter(_BelowWarning())

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    stderr_handler.setLevel(logging.WARNING)

    package_logger.addHandler(stdout_handler)
    package_logger.addHandler(stderr_handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def resolve_output(input_arg: str, output_arg: str) -> str:
    """Pick the output folder.

    When both arguments are the literal ``input`` the archive goes to the
    current directory instead of into the input folder.
    """
    if output_arg == "input" and input_arg == "input":
        return "."
    return output_arg


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="emlbox",
        description="Converts single or multiple eml files into an mbox",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="input",
        help="Eml file or folder to be parsed (default: input)",
    )
    parser.add_argument(
        "output",
        nargs="?",
        default=".",
        help="Destination folder of the final mbox file (default: .)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of parallel readers for folder runs (default: auto)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show per-chunk details",
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Do not print the startup banner",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def convert(input_arg: str, output_arg: str, options: ConvertOptions = DEFAULT_OPTIONS) -> None:
    """Convert an input path into an archive, exiting with status 1 on failure.

    Args:
        input_arg: Eml file or folder path
        output_arg: Destination folder path
        options: Conversion settings
    """
    output = resolve_output(input_arg, output_arg)
    try:
        convert_path(Path(input_arg), Path(output), options)
    except (ConversionError, OSError) as e:
        logger.error(f"Error: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    if not args.no_banner:
        logger.info(BANNER)

    try:
        options = dataclasses.replace(DEFAULT_OPTIONS, workers=args.workers)
    except ValueError as e:
        parser.error(str(e))

    convert(args.input, args.output, options)


if __name__ == "__main__":
    main()

"""Exceptions raised by the conversion engine.

Filesystem failures are not wrapped: they surface as the builtin
``OSError`` family exactly as raised by the read or write that failed.
"""


class ConversionError(Exception):
    """Base class for conversion failures that are not plain I/O errors."""


class InvalidPathError(ConversionError):
    """Input path is neither a directory nor a file with the input extension."""


class NoEmlFilesError(ConversionError):
    """A readable directory holds no file with the input extension."""

    def __init__(self, message: str = "No .eml files found in the provided directory"):
        super().__init__(message)

"""emlbox - pack .eml message files into a single mbox archive."""

__version__ = "0.1.0"

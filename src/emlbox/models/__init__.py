"""Data models for emlbox."""

from emlbox.models.message import Batch, ConversionProgress, ConversionResult, Message

__all__ = ["Message", "Batch", "ConversionResult", "ConversionProgress"]

"""Domain layer for book index representation."""

from .errors import (
    ParseError,
    SummaryDecodeError,
    SummaryError,
    SummaryNotFoundError,
    SummaryParseError,
)
from .outline import Entry, Outline

__all__ = [
    "Entry",
    "Outline",
    "ParseError",
    "SummaryDecodeError",
    "SummaryError",
    "SummaryNotFoundError",
    "SummaryParseError",
]

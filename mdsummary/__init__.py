"""mdsummary - parser for book index (SUMMARY.md) documents.

Reads the prefatory links of an index file into an Outline and reports
syntax errors with byte offsets that map back to line and column.
"""

from .domain import Entry, Outline, ParseError
from .parsing import SummaryParser, parse_summary, to_linecol
from .services import SummaryResult, SummaryService

__all__ = [
    "Entry",
    "Outline",
    "ParseError",
    "SummaryParser",
    "SummaryResult",
    "SummaryService",
    "parse_summary",
    "to_linecol",
]

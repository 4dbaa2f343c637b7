"""Character-level parser for book index documents."""

from .cursor import Cursor
from .diagnostics import ErrorCollector, format_diagnostic, to_linecol
from .links import ScanResult, scan_link
from .summary import ParserState, SummaryParser, parse_summary

__all__ = [
    "Cursor",
    "ErrorCollector",
    "ParserState",
    "ScanResult",
    "SummaryParser",
    "format_diagnostic",
    "parse_summary",
    "scan_link",
    "to_linecol",
]

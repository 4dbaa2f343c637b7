"""Service layer for reading and parsing index files."""

from .summary_service import SummaryResult, SummaryService

__all__ = [
    "SummaryResult",
    "SummaryService",
]

"""
Configuration settings for the book index tools
"""

import logging
import os
from pathlib import Path


class SummaryConfig:
    """Configuration class for locating, reading and displaying index files."""

    # Index file lookup
    SUMMARY_FILENAME = "SUMMARY.md"
    SEARCH_SUBDIRS = ("src", "")
    ENCODING = "utf-8"

    # Environment overrides
    BOOK_ROOT_ENV = "MDSUMMARY_BOOK_ROOT"
    LOG_LEVEL_ENV = "MDSUMMARY_LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "WARNING"

    # Color scheme
    COLORS = {
        'header': 'bold blue',
        'section': 'bold green',
        'destination': 'dim',
        'error': 'red',
        'success': 'green',
    }

    @classmethod
    def get_default_book_root(cls) -> Path:
        """Get the book root directory, checking environment variables."""
        env_root = os.environ.get(cls.BOOK_ROOT_ENV)
        if env_root:
            return Path(env_root)
        return Path.cwd()

    @classmethod
    def get_log_level(cls) -> int:
        """Get the logging level, checking environment variables."""
        name = os.environ.get(cls.LOG_LEVEL_ENV, cls.DEFAULT_LOG_LEVEL).upper()
        level = logging.getLevelName(name)
        if isinstance(level, int):
            return level
        return logging.WARNING

    @classmethod
    def summary_candidates(cls, book_dir: Path) -> list[Path]:
        """Locations checked for the index file, in priority order."""
        return [
            book_dir / subdir / cls.SUMMARY_FILENAME
            for subdir in cls.SEARCH_SUBDIRS
        ]

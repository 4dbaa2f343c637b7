"""Summary service implementation.

Locates and reads index files, runs the parser over them and renders the
resulting diagnostics for display.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..config import SummaryConfig
from ..domain import (
    Outline,
    ParseError,
    SummaryDecodeError,
    SummaryNotFoundError,
    SummaryParseError,
)
from ..parsing import SummaryParser

logger = logging.getLogger(__name__)


@dataclass
class SummaryResult:
    """Everything one parse pass produced."""

    text: str
    outline: Optional[Outline]  # None when any error was recorded
    partial: Outline  # built even when errors exist
    errors: list[ParseError] = field(default_factory=list)
    messages: list[str] = field(default_factory=list)  # "line:col: message"
    source: Optional[Path] = None

    @property
    def ok(self) -> bool:
        """Check if the pass recorded no errors."""
        return not self.errors

    @property
    def entry_count(self) -> int:
        return sum(1 for _ in self.partial.entries())


class SummaryService:
    """Service for reading and parsing book index files."""

    def __init__(self, config: type[SummaryConfig] = SummaryConfig) -> None:
        """Initialize the summary service.

        Args:
            config: Configuration class supplying file names and encoding.
        """
        self._config = config

    def find_summary(self, location: Path) -> Path:
        """Resolve a file or book directory to the index file.

        Args:
            location: Path to an index file or to a book root directory.

        Returns:
            Path to the index file.

        Raises:
            SummaryNotFoundError: If no index file exists there.
        """
        if location.is_file():
            return location

        if location.is_dir():
            for candidate in self._config.summary_candidates(location):
                if candidate.is_file():
                    return candidate

        raise SummaryNotFoundError(location)

    def load(self, path: Path) -> str:
        """Read an index file as text.

        Raises:
            SummaryNotFoundError: If the file does not exist.
            SummaryDecodeError: If the file is not valid in the configured encoding.
        """
        try:
            return path.read_text(encoding=self._config.ENCODING)
        except FileNotFoundError as e:
            raise SummaryNotFoundError(path) from e
        except UnicodeDecodeError as e:
            raise SummaryDecodeError(path, e) from e

    def parse_text(self, text: str, source: Optional[Path] = None) -> SummaryResult:
        """Parse index text that is already in memory."""
        parser = SummaryParser(text)
        outline = parser.parse()
        result = SummaryResult(
            text=text,
            outline=outline,
            partial=parser.outline,
            errors=parser.errors,
            messages=parser.format_errors(),
            source=source,
        )

        if result.ok:
            logger.info("Parsed %s: %d entries", source or "<text>", result.entry_count)
        else:
            logger.warning(
                "Parsed %s with %d error(s)", source or "<text>", len(result.errors)
            )
        return result

    def parse_file(self, location: Path) -> SummaryResult:
        """Find, read and parse an index file.

        Args:
            location: Index file or book directory.

        Returns:
            SummaryResult for the file that was found.
        """
        path = self.find_summary(location)
        logger.debug("Reading index from %s", path)
        return self.parse_text(self.load(path), source=path)

    def require_outline(self, result: SummaryResult) -> Outline:
        """Return the outline of a clean pass.

        Raises:
            SummaryParseError: If the pass recorded any diagnostics.
        """
        if result.outline is None:
            raise SummaryParseError(result.errors, result.messages, result.source)
        return result.outline

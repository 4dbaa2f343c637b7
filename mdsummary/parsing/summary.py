"""Single-pass parser for SUMMARY.md style book indexes.

Structure example:
    # Summary

    [Preface](preface.md)
    [Foreword](foreword.md)

    - [Introduction](intro.md)

The title line is skipped, unnumbered links before the first list item are
prefaces. Parsing stops at the first `-`; numbered chapters and appendices
are not read yet.

Syntax errors never stop the pass. The offending line is dropped and the
error is recorded, so one run reports every problem in the document.
"""

import enum
import logging
from typing import Optional

from ..domain.errors import ParseError
from ..domain.outline import Outline
from .cursor import Cursor
from .diagnostics import ErrorCollector, format_diagnostic, to_linecol
from .links import scan_link

logger = logging.getLogger(__name__)


class ParserState(enum.Enum):
    """Sections of the index, in the order they are visited."""

    HEADER = "header"
    PREFACES = "prefaces"
    CHAPTERS = "chapters"  # reserved, not reached yet
    APPENDICES = "appendices"  # reserved, not reached yet
    DONE = "done"


class SummaryParser:
    """One parse pass over an index document.

    The outline and the diagnostics stay available after `parse()` returns,
    so callers can inspect the partial structure of a failed pass.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.state = ParserState.HEADER
        self._cursor = Cursor(text)
        self._outline = Outline()
        self._errors = ErrorCollector()

    @property
    def outline(self) -> Outline:
        """The outline as built so far, returned even when errors exist."""
        return self._outline.snapshot()

    @property
    def errors(self) -> list[ParseError]:
        return list(self._errors)

    def contains_errors(self) -> bool:
        return self._errors.has_errors()

    def parse(self) -> Optional[Outline]:
        """Run the parser.

        Returns:
            The outline, or None if any diagnostic was recorded.
        """
        while self.state is not ParserState.DONE:
            if self.state is ParserState.HEADER:
                self._parse_header()
                self._transition(ParserState.PREFACES)
            elif self.state is ParserState.PREFACES:
                self._parse_prefaces()
                self._transition(ParserState.DONE)
            else:
                # Chapters and appendices are not parsed yet
                self._transition(ParserState.DONE)

        logger.debug(
            "Parsed %d preface(s) with %d error(s)",
            len(self._outline.prefaces),
            len(self._errors),
        )
        if self._errors.has_errors():
            return None
        return self._outline.snapshot()

    def to_linecol(self, offset: int) -> tuple[int, int]:
        """Convert a byte offset from a diagnostic to a 0-based (line, column)."""
        return to_linecol(self.text, offset)

    def format_errors(self) -> list[str]:
        """Render every diagnostic as "line:column: message"."""
        return [format_diagnostic(self.text, error) for error in self._errors]

    def _transition(self, state: ParserState) -> None:
        logger.debug("Parser state %s -> %s", self.state.value, state.value)
        self.state = state

    def _parse_header(self) -> None:
        # The title line is decorative
        if self._cursor.eat("#"):
            self._cursor.eat_until_eol()

    def _parse_prefaces(self) -> None:
        cursor = self._cursor
        while not cursor.at_end():
            if cursor.newline():
                continue

            offset, ch = cursor.peek()
            if ch == "[":
                result = scan_link(cursor, self._errors)
                if result.found:
                    self._outline.prefaces.append(result.link)
                else:
                    cursor.eat_until_eol()
            elif ch == "-":
                # Start of the numbered chapters
                return
            else:
                # FIXME: whitespace-only lines are reported here too
                self._errors.record(f"Unexpected character '{ch}'", offset)
                cursor.eat_until_eol()


def parse_summary(text: str) -> tuple[Optional[Outline], list[ParseError]]:
    """Parse index text in one call.

    Returns:
        Tuple of (outline or None, diagnostics).
    """
    parser = SummaryParser(text)
    outline = parser.parse()
    return outline, parser.errors

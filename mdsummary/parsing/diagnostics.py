"""Diagnostic collection and offset-to-position mapping."""

import logging
from typing import Iterator

from ..domain.errors import ParseError

logger = logging.getLogger(__name__)


class ErrorCollector:
    """Append-only list of diagnostics recorded during one parse pass."""

    def __init__(self) -> None:
        self.errors: list[ParseError] = []

    def record(self, message: str, offset: int) -> ParseError:
        """Append a diagnostic at the given byte offset."""
        error = ParseError(message, offset)
        logger.debug("Recorded diagnostic at byte %d: %s", offset, message)
        self.errors.append(error)
        return error

    def has_errors(self) -> bool:
        """Check if any diagnostic was recorded."""
        return bool(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[ParseError]:
        return iter(self.errors)


def _lines(text: str) -> list[str]:
    """Split text into lines the way the offsets are counted.

    Lines end at `\\n`, a trailing `\\r` is not part of the line and a final
    empty segment after the last newline is not a line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def to_linecol(text: str, offset: int) -> tuple[int, int]:
    """Convert a byte offset in `text` to a (line, column) pair.

    Both values are 0-based and the column is measured in bytes. Offsets past
    the last line map to (number of lines, 0).

    Args:
        text: The original text the offset was recorded against.
        offset: Byte offset, usually taken from a ParseError.

    Returns:
        Tuple of (line index, column).
    """
    cur = 0
    lines = _lines(text)
    for i, line in enumerate(lines):
        length = len(line.encode("utf-8"))
        if cur + length + 1 > offset:
            return i, offset - cur
        cur += length + 1
    return len(lines), 0


def format_diagnostic(text: str, error: ParseError) -> str:
    """Render a diagnostic as "line:column: message", both 1-based."""
    line, col = to_linecol(text, error.byte)
    return f"{line + 1}:{col + 1}: {error.desc}"

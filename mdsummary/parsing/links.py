"""Scanner for markdown links of the form `[title](destination)`."""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from ..domain.outline import Entry
from .cursor import Cursor
from .diagnostics import ErrorCollector

logger = logging.getLogger(__name__)

ESCAPE = "\\"


class _Stop(enum.Enum):
    """How a delimited run ended."""

    CLOSED = "closed"
    NEWLINE = "newline"
    EOF = "eof"


@dataclass(frozen=True)
class ScanResult:
    """Outcome of a link scan: either an entry or a definite "no entry".

    Build instances with `ScanResult.entry()` or `ScanResult.no_entry()`.
    """

    link: Optional[Entry] = None

    @classmethod
    def entry(cls, link: Entry) -> "ScanResult":
        return cls(link)

    @classmethod
    def no_entry(cls) -> "ScanResult":
        return cls(None)

    @property
    def found(self) -> bool:
        return self.link is not None


def _scan_delimited(cursor: Cursor, opener: str, closer: str) -> tuple[str, _Stop]:
    """Collect text up to the `closer` matching an already consumed `opener`.

    Nested opener/closer pairs are kept in the text. A backslash is kept and
    the character after it is taken as-is. A line ending stops the run after
    being consumed.
    """
    text: list[str] = []
    balance = 1

    while not cursor.at_end():
        if cursor.newline():
            return "".join(text), _Stop.NEWLINE

        _, ch = cursor.peek()
        if ch == opener:
            balance += 1
        elif ch == closer and balance > 1:
            balance -= 1
        elif ch == ESCAPE:
            text.append(ch)
            cursor.advance()
            if cursor.at_end():
                break
        elif ch == closer:
            cursor.advance()
            return "".join(text), _Stop.CLOSED

        text.append(cursor.advance()[1])

    return "".join(text), _Stop.EOF


def expect(cursor: Cursor, errors: ErrorCollector, ch: str) -> bool:
    """Consume `ch`, or record an expectation failure at the current offset."""
    if cursor.eat(ch):
        return True

    found = cursor.peek()
    if found is not None:
        message = f"expected `{ch}`, but found `{found[1]}`"
    else:
        message = f"expected `{ch}`, but found eof"
    errors.record(message, cursor.position())
    return False


def scan_link(cursor: Cursor, errors: ErrorCollector) -> ScanResult:
    """Scan one link starting at the `[` under the cursor.

    Input is consumed whether or not a link is produced. The only
    diagnostic written here is a missing `(` after the title; every other
    failure is reported to the caller as `ScanResult.no_entry()`.

    Args:
        cursor: Cursor positioned on the opening bracket.
        errors: Collector receiving the missing-`(` diagnostic.

    Returns:
        ScanResult carrying the Entry on success.
    """
    start = cursor.position()
    cursor.eat("[")

    title, stop = _scan_delimited(cursor, "[", "]")
    if stop is _Stop.NEWLINE:
        logger.debug("Link at byte %d: title crosses a line break", start)
        return ScanResult.no_entry()

    if not expect(cursor, errors, "("):
        return ScanResult.no_entry()

    destination, stop = _scan_delimited(cursor, "(", ")")
    if stop is not _Stop.CLOSED:
        logger.debug("Link at byte %d: unterminated destination (%s)", start, stop.value)
        return ScanResult.no_entry()

    return ScanResult.entry(Entry(title, destination))

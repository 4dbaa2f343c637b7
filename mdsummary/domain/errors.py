"""Diagnostics and exceptions for book index parsing."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class ParseError:
    """A recoverable syntax error found while parsing.

    The offset is a UTF-8 byte offset into the parsed text.
    """

    desc: str
    byte: int

    def __str__(self) -> str:
        return self.desc


class SummaryError(Exception):
    """Base class for errors raised around the parser."""


class SummaryNotFoundError(SummaryError, FileNotFoundError):
    """No index file could be found at the requested location."""

    def __init__(self, location: Path) -> None:
        self.location = location
        super().__init__(f"No SUMMARY.md found at {location}")


class SummaryDecodeError(SummaryError):
    """The index file is not valid text in the configured encoding."""

    def __init__(self, location: Path, cause: UnicodeDecodeError) -> None:
        self.location = location
        self.cause = cause
        super().__init__(
            f"Cannot decode {location} as {cause.encoding}: "
            f"invalid byte at offset {cause.start}"
        )


class SummaryParseError(SummaryError):
    """The index file contained one or more syntax errors.

    Args:
        errors: The recorded diagnostics, in parse order.
        messages: The same diagnostics rendered as "line:col: message".
        source: File the text was read from, if any.
    """

    def __init__(
        self,
        errors: list[ParseError],
        messages: list[str],
        source: Optional[Path] = None,
    ) -> None:
        self.errors = errors
        self.messages = messages
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"{len(errors)} syntax error(s){where}")

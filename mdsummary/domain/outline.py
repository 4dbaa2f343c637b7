"""Domain models for a parsed book index.

Provides the Entry node produced by the link scanner and the three-section
Outline built by the summary parser.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Optional


@dataclass(frozen=True)
class Entry:
    """A single link in the book index.

    Title and destination are kept exactly as written, escapes included.
    """

    title: str
    destination: str
    children: Optional[tuple["Entry", ...]] = None  # None for a leaf

    @property
    def is_leaf(self) -> bool:
        """Check if the entry has no nested entries."""
        return not self.children

    def with_children(self, children: Iterable["Entry"]) -> "Entry":
        """Return a copy of this entry holding the given children."""
        return replace(self, children=tuple(children))

    def to_markdown(self, indent: int = 0, bullet: str = "") -> list[str]:
        """Render the entry and its children as markdown lines.

        Args:
            indent: Nesting depth, two spaces per level.
            bullet: List marker placed before the link, e.g. "- ".

        Returns:
            One line for this entry followed by the lines of its children.
        """
        prefix = "  " * indent
        lines = [f"{prefix}{bullet}[{self.title}]({self.destination})"]
        for child in self.children or ():
            lines.extend(child.to_markdown(indent + 1, bullet or "- "))
        return lines


@dataclass
class Outline:
    """The three sections of a book index."""

    prefaces: list[Entry] = field(default_factory=list)
    chapters: list[Entry] = field(default_factory=list)
    appendices: list[Entry] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.prefaces or self.chapters or self.appendices)

    def entries(self) -> Iterator[Entry]:
        """Iterate top-level entries of all sections in document order."""
        yield from self.prefaces
        yield from self.chapters
        yield from self.appendices

    def destinations(self) -> list[str]:
        """Get every destination referenced in the outline, nested ones included."""
        found: list[str] = []

        def collect(entries: Iterable[Entry]) -> None:
            for entry in entries:
                found.append(entry.destination)
                collect(entry.children or ())

        collect(self.entries())
        return found

    def snapshot(self) -> "Outline":
        """Return a copy that later parser mutations cannot reach."""
        return Outline(
            prefaces=list(self.prefaces),
            chapters=list(self.chapters),
            appendices=list(self.appendices),
        )

    def to_markdown(self, title: str = "Summary") -> str:
        """Render the outline back to index markdown."""
        lines = [f"# {title}", ""]
        for entry in self.prefaces:
            lines.extend(entry.to_markdown())

        if self.chapters:
            lines.append("")
            for entry in self.chapters:
                lines.extend(entry.to_markdown(bullet="- "))

        if self.appendices:
            lines.append("")
            for entry in self.appendices:
                lines.extend(entry.to_markdown())

        return "\n".join(lines) + "\n"

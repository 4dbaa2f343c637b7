"""
Tests for the Entry and Outline domain models
"""

import dataclasses

import pytest

from mdsummary.domain import Entry, Outline


class TestEntry:
    """Test Entry methods."""

    def test_defaults_to_leaf(self):
        entry = Entry("Intro", "intro.md")

        assert entry.children is None
        assert entry.is_leaf

    def test_is_immutable(self):
        entry = Entry("Intro", "intro.md")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.title = "Other"

    def test_with_children_returns_copy(self):
        """Should leave the original entry untouched."""
        parent = Entry("Basics", "basics.md")
        nested = parent.with_children([Entry("Install", "install.md")])

        assert parent.children is None
        assert nested.children == (Entry("Install", "install.md"),)
        assert not nested.is_leaf

    def test_to_markdown(self):
        entry = Entry("Intro", "intro.md")
        assert entry.to_markdown() == ["[Intro](intro.md)"]

    def test_to_markdown_nested(self):
        """Children should be indented list items."""
        entry = Entry("Basics", "b.md").with_children(
            [Entry("Install", "i.md").with_children([Entry("Linux", "l.md")])]
        )

        assert entry.to_markdown(bullet="- ") == [
            "- [Basics](b.md)",
            "  - [Install](i.md)",
            "    - [Linux](l.md)",
        ]


class TestOutline:
    """Test Outline methods."""

    def test_empty(self):
        outline = Outline()

        assert outline.is_empty
        assert list(outline.entries()) == []

    def test_entries_in_section_order(self):
        outline = Outline(
            prefaces=[Entry("P", "p")],
            chapters=[Entry("C", "c")],
            appendices=[Entry("A", "a")],
        )
        assert [e.title for e in outline.entries()] == ["P", "C", "A"]

    def test_destinations_include_children(self):
        outline = Outline(
            prefaces=[Entry("P", "p.md")],
            chapters=[Entry("C", "c.md").with_children([Entry("S", "s.md")])],
        )
        assert outline.destinations() == ["p.md", "c.md", "s.md"]

    def test_snapshot_is_independent(self):
        outline = Outline(prefaces=[Entry("P", "p")])
        copy = outline.snapshot()
        outline.prefaces.append(Entry("Q", "q"))

        assert copy.prefaces == [Entry("P", "p")]

    def test_to_markdown(self):
        outline = Outline(
            prefaces=[Entry("Preface", "preface.md")],
            chapters=[Entry("Intro", "intro.md")],
        )
        assert outline.to_markdown() == (
            "# Summary\n\n[Preface](preface.md)\n\n- [Intro](intro.md)\n"
        )

"""
Tests for the forward-only text cursor

Tests:
- Lookahead and consumption
- Byte offsets for multi-byte characters
- Line ending and whitespace helpers
"""

from mdsummary.parsing import Cursor


class TestPeekAndAdvance:
    """Test basic cursor movement."""

    def test_peek_does_not_consume(self):
        """Peeking should leave the position unchanged."""
        cursor = Cursor("ab")

        assert cursor.peek() == (0, "a")
        assert cursor.peek(1) == (1, "b")
        assert cursor.peek() == (0, "a")

    def test_peek_past_end(self):
        """Peeking beyond the input should return None."""
        cursor = Cursor("a")
        assert cursor.peek(1) is None

    def test_advance_consumes(self):
        """Advance should return each character once, then None."""
        cursor = Cursor("ab")

        assert cursor.advance() == (0, "a")
        assert cursor.advance() == (1, "b")
        assert cursor.advance() is None
        assert cursor.at_end()

    def test_empty_input(self):
        """Empty text should start at the end."""
        cursor = Cursor("")

        assert cursor.at_end()
        assert cursor.peek() is None
        assert cursor.position() == 0


class TestByteOffsets:
    """Test that positions are UTF-8 byte offsets."""

    def test_multibyte_offsets(self):
        """Offsets should skip over every byte of a wide character."""
        cursor = Cursor("é[x")

        assert cursor.peek(0) == (0, "é")
        assert cursor.peek(1) == (2, "[")
        assert cursor.peek(2) == (3, "x")

    def test_position_at_end_is_byte_length(self):
        """Position at the end should be the byte length of the text."""
        cursor = Cursor("日本")
        cursor.advance()
        cursor.advance()

        assert cursor.position() == 6
        assert cursor.byte_length == 6


class TestHelpers:
    """Test eat, newline and whitespace helpers."""

    def test_eat_matching(self):
        cursor = Cursor("#x")

        assert cursor.eat("#")
        assert not cursor.eat("#")
        assert cursor.peek() == (1, "x")

    def test_eat_until_eol(self):
        """Should consume the newline as well."""
        cursor = Cursor("abc\nd")
        cursor.eat_until_eol()

        assert cursor.peek() == (4, "d")

    def test_eat_until_eol_without_newline(self):
        """Should stop at the end of input."""
        cursor = Cursor("abc")
        cursor.eat_until_eol()

        assert cursor.at_end()

    def test_newline_variants(self):
        """Should accept both LF and CRLF."""
        cursor = Cursor("\n\r\nx")

        assert cursor.newline()
        assert cursor.newline()
        assert not cursor.newline()
        assert cursor.peek() == (3, "x")

    def test_lone_carriage_return_is_not_newline(self):
        cursor = Cursor("\rx")
        assert not cursor.newline()

    def test_whitespace(self):
        """Should consume spaces and tabs only."""
        cursor = Cursor(" \t x")

        assert cursor.whitespace()
        assert not cursor.whitespace()
        assert cursor.peek() == (3, "x")

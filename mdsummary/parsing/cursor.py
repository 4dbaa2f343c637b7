"""Forward-only cursor over index text.

Characters are addressed by code point but every position handed out is a
UTF-8 byte offset into the original text.
"""

from typing import Optional

Position = tuple[int, str]


class Cursor:
    """Character cursor with lookahead, reporting byte offsets."""

    def __init__(self, text: str) -> None:
        self._chars: list[Position] = []
        offset = 0
        for ch in text:
            self._chars.append((offset, ch))
            offset += len(ch.encode("utf-8"))
        self._end = offset
        self._index = 0

    @property
    def byte_length(self) -> int:
        """Length of the underlying text in bytes."""
        return self._end

    def peek(self, n: int = 0) -> Optional[Position]:
        """Look `n` characters ahead without consuming anything."""
        index = self._index + n
        if index < len(self._chars):
            return self._chars[index]
        return None

    def advance(self) -> Optional[Position]:
        """Consume and return the next character, or None at end of input."""
        if self._index >= len(self._chars):
            return None
        pos = self._chars[self._index]
        self._index += 1
        return pos

    def at_end(self) -> bool:
        """Check if every character has been consumed."""
        return self._index >= len(self._chars)

    def position(self) -> int:
        """Byte offset of the next character, or the text length at the end."""
        pos = self.peek()
        return pos[0] if pos is not None else self._end

    def eat(self, ch: str) -> bool:
        """Consume the next character if it is `ch`."""
        pos = self.peek()
        if pos is not None and pos[1] == ch:
            self._index += 1
            return True
        return False

    def eat_until_eol(self) -> None:
        """Discard everything up to and including the next newline."""
        while True:
            pos = self.advance()
            if pos is None or pos[1] == "\n":
                break

    def whitespace(self) -> bool:
        """Consume spaces and tabs. Returns True if any were consumed."""
        consumed = False
        while True:
            pos = self.peek()
            if pos is None or pos[1] not in (" ", "\t"):
                return consumed
            self._index += 1
            consumed = True

    def newline(self) -> bool:
        """Consume a `\\n` or `\\r\\n` line ending if one is next."""
        pos = self.peek()
        if pos is None:
            return False
        if pos[1] == "\n":
            self._index += 1
            return True
        following = self.peek(1)
        if pos[1] == "\r" and following is not None and following[1] == "\n":
            self._index += 2
            return True
        return False

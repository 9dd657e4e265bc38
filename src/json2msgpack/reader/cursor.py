"""
Lookahead-1 cursor over an in-memory JSON text.

Offsets are codepoint indices into the ``str`` being read.
"""

from __future__ import annotations

from ..errors import MalformedJSONError

WHITESPACE = frozenset(" \t\n\r")


class Cursor:
    """Reads a JSON text one codepoint at a time."""

    __slots__ = ("_text", "_len", "offset")

    def __init__(self, text: str) -> None:
        self._text = text
        self._len = len(text)
        self.offset = 0

    @property
    def at_end(self) -> bool:
        return self.offset >= self._len

    def peek(self) -> str:
        """Return the next codepoint without consuming it."""
        if self.offset >= self._len:
            raise MalformedJSONError("unexpected end of input", self.offset)
        return self._text[self.offset]

    def advance(self) -> str:
        """Consume and return the next codepoint."""
        if self.offset >= self._len:
            raise MalformedJSONError("unexpected end of input", self.offset)
        c = self._text[self.offset]
        self.offset += 1
        return c

    def skip_whitespace(self) -> None:
        text, n, i = self._text, self._len, self.offset
        while i < n and text[i] in WHITESPACE:
            i += 1
        self.offset = i

    def expect(self, char: str) -> None:
        start = self.offset
        c = self.advance()
        if c != char:
            raise MalformedJSONError(f"expected {char!r}, found {c!r}", start)

    def expect_keyword(self, word: str) -> None:
        """Consume ``word`` exactly, e.g. ``true``."""
        start = self.offset
        got = self._text[start : start + len(word)]
        if got != word:
            raise MalformedJSONError(f"invalid literal, expected {word!r}", start)
        self.offset = start + len(word)

    def take_while_not(self, stop: frozenset[str]) -> str:
        """Consume the longest run of codepoints not in ``stop``."""
        text, n, i = self._text, self._len, self.offset
        while i < n and text[i] not in stop:
            i += 1
        run = text[self.offset : i]
        self.offset = i
        return run


__all__: tuple[str, ...] = ("Cursor", "WHITESPACE")

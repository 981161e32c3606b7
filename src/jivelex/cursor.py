"""Character cursor with line/column tracking over a source string."""

from __future__ import annotations

from jivelex.tokens import Position


class Cursor:
    """Walk a source string one character at a time.

    The cursor starts at offset 0, line 1, column 1. Consuming a newline moves
    to column 1 of the next line; consuming anything else moves one column
    right. Reads past the end return ``""`` and do not move the cursor.
    """

    __slots__ = ("_source", "_length", "offset", "line", "column")

    def __init__(self, source: str) -> None:
        self._source = source
        self._length = len(source)
        self.offset = 0
        self.line = 1
        self.column = 1

    def at_end(self) -> bool:
        return self.offset >= self._length

    def peek(self) -> str:
        if self.offset < self._length:
            return self._source[self.offset]
        return ""

    def peek_next(self) -> str:
        idx = self.offset + 1
        if idx < self._length:
            return self._source[idx]
        return ""

    def advance(self) -> str:
        if self.offset >= self._length:
            return ""
        ch = self._source[self.offset]
        self.offset += 1
        if ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def position(self) -> Position:
        return Position(self.line, self.column, self.offset)

    def slice_from(self, start: Position) -> str:
        """Return the source text consumed since *start*."""
        return self._source[start.offset : self.offset]

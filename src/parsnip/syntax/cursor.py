"""Immutable cursor over source text.

Every parsing step receives a Cursor and hands back an Outcome whose
remainder is another Cursor. Cursors never mutate; advancing returns a new
instance sharing the same source string.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - Position is validated at construction: 0 <= pos <= len(source)
    - EOF is a state (is_eof), not a return value
    - Line:column computed on-demand (only needed for error reporting)

Line Ending Support:
    Line and column computation uses \\n as the line delimiter, so LF and
    CRLF sources report correct lines. CR-only sources do not.

Python 3.13+. Zero external dependencies.
"""

from bisect import bisect_right
from dataclasses import dataclass

__all__ = ["Cursor", "LineOffsetCache"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    The source string is referenced, never copied; slices are taken only
    when a step extracts matched text or a diagnostic window.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance(2).current
        'l'
        >>> cursor.current  # Original unchanged
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    def __post_init__(self) -> None:
        """Validate cursor bounds.

        Raises:
            ValueError: If pos is negative or past the end of source.
        """
        if self.pos < 0:
            msg = f"Cursor position must be >= 0, got {self.pos}"
            raise ValueError(msg)
        if self.pos > len(self.source):
            msg = f"Cursor position {self.pos} exceeds source length {len(self.source)}"
            raise ValueError(msg)

    @property
    def is_eof(self) -> bool:
        """True when every character has been consumed."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Character at the cursor position

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        The new position is clamped to the end of the source.

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.advance(10).pos
            5
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive).

        Example:
            >>> start = Cursor("hello world", 0)
            >>> end = start.advance(5)
            >>> start.slice_to(end.pos)
            'hello'
        """
        return self.source[self.pos : end_pos]

    def slice(self, start: int, end: int) -> str:
        """Extract source[start:end] independent of the current position."""
        return self.source[start:end]

    def recently_consumed(self, window: int) -> str:
        """Get up to window characters immediately before the position.

        Only the window is sliced, so the cost does not grow with the
        amount of input already consumed.

        Example:
            >>> Cursor("abcdefghijklmno", 12).recently_consumed(10)
            'cdefghijkl'
            >>> Cursor("abcdefghijklmno", 5).recently_consumed(10)
            'abcde'
        """
        start = max(0, self.pos - window)
        return self.source[start : self.pos]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple, 1-indexed like text editors

        Performance:
            O(n) in the position. Use LineOffsetCache when resolving many
            positions in the same source.

        Example:
            >>> Cursor("line1\\nline2", 8).compute_line_col()
            (2, 3)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


class LineOffsetCache:
    """Line start offsets of one source, for resolving many positions.

    Built once per source (the formatter builds one per ``format_all`` call),
    then each lookup is a ``bisect`` over the line starts.

    Example:
        >>> cache = LineOffsetCache("abc\\ndef\\nghi")
        >>> cache.get_line_col(0)
        (1, 1)
        >>> cache.get_line_col(4)
        (2, 1)
    """

    __slots__ = ("_line_starts", "_source_len")

    def __init__(self, source: str) -> None:
        starts = [0]
        newline = source.find("\n")
        while newline >= 0:
            starts.append(newline + 1)
            newline = source.find("\n", newline + 1)
        self._line_starts: tuple[int, ...] = tuple(starts)
        self._source_len = len(source)

    @property
    def line_count(self) -> int:
        """Number of lines in the indexed source."""
        return len(self._line_starts)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get (line, column) for pos, 1-indexed.

        Positions outside the source are clamped to its bounds.
        """
        pos = min(max(pos, 0), self._source_len)
        line = bisect_right(self._line_starts, pos)
        return (line, pos - self._line_starts[line - 1] + 1)

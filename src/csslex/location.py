"""Source location tracking for error messages and debugging.

Provides SourceLocation for mapping a token offset back to a line and
column in the stylesheet, plus a small index that does the mapping.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    Line and column are 1-indexed; offsets are 0-indexed code-point
    positions in the source string.

    Examples:
            >>> loc = SourceLocation(lineno=1, col_offset=1)
            >>> loc
        SourceLocation(lineno=1, col_offset=1, offset=0, ...)

            >>> loc = SourceLocation(3, 5, 40, 44, "site.css")
            >>> str(loc)
            'site.css:3:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.css:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location."""
        return cls(lineno=0, col_offset=0)


class LineIndex:
    """Offset to (line, column) lookup over a fixed source string.

    Line starts are collected once with str.find, each lookup is a
    binary search.
    """

    __slots__ = ("_starts",)

    def __init__(self, source: str) -> None:
        starts = [0]
        idx = source.find("\n")
        while idx != -1:
            starts.append(idx + 1)
            idx = source.find("\n", idx + 1)
        self._starts = starts

    def line_col(self, offset: int) -> tuple[int, int]:
        """Return the 1-indexed (line, column) of offset."""
        line = bisect_right(self._starts, offset)
        return line, offset - self._starts[line - 1] + 1

"""Token and TokenType definitions for the csslex lexer.

The lexer produces a stream of Token objects for a downstream consumer.
Each Token has a type, a trimmed text value, and the offset where its
pending span began.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from csslex.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    The set is closed. ERROR is always the last token of a stream
    when it appears.

    """

    # Lexing failure (value holds the message)
    ERROR = auto()

    # Regular rules
    SELECTOR = auto()  # div p
    DECLARATION = auto()  # color: red
    BLOCK_START = auto()  # {
    BLOCK_END = auto()  # }

    # At-rules
    AT_RULE_IDENT = auto()  # @media
    AT_RULE_BODY = auto()  # url(x) print
    AT_RULE_BLOCK_START = auto()  # { after an at-rule prelude
    AT_RULE_BLOCK_END = auto()  # } closing the at-rule block


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Trimmed text of the pending span, or the error message
        pos: Offset where the untrimmed pending span began
        _lineno: Line number of pos (1-indexed)
        _col: Column of pos (1-indexed)
        _end_offset: Offset just past the pending span
        _source_file: Optional source file path

    Note that pos may point at leading whitespace that was trimmed out
    of value.

    """

    type: TokenType
    value: str
    pos: int
    _lineno: int = 1
    _col: int = 1
    _end_offset: int | None = None
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from csslex.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self.pos,
            end_offset=self.pos if self._end_offset is None else self._end_offset,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.pos})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    @property
    def is_error(self) -> bool:
        """True for the ERROR token that ends a failed run."""
        return self.type is TokenType.ERROR

"""Exception classes and error codes for csslex.

The lexer itself never raises for malformed CSS: it ends the token
stream with a single ERROR token. LexError lets callers turn that token
into an exception when they prefer one.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from csslex.tokens import Token


class ErrorCode(Enum):
    """Fatal lexing conditions. The value is the ERROR token's message."""

    UNCLOSED_COMMENT = "unclosed comment"
    UNCLOSED_BLOCK = "unclosed block"
    MISSING_AT_RULE_IDENT = "missing at-rule ident"
    MISSING_AT_RULE_BODY = "missing at-rule body"
    UNTERMINATED_SELECTOR = "unterminated selector"


class CssLexError(Exception):
    """Base exception for all csslex errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(CssLexError):
    """Lexing failed; the stylesheet cannot be tokenized.

    Raised by tokenize(..., raise_on_error=True) when the stream ends
    with an ERROR token.
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error with optional location.

        Args:
            message: Error description
            offset: Offset where the failing pending span began
            lineno: Line number of offset (1-indexed)
            col_offset: Column of offset (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.offset = offset
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @property
    def code(self) -> ErrorCode | None:
        """The ErrorCode matching message, if any."""
        try:
            return ErrorCode(self.message)
        except ValueError:
            return None

    @classmethod
    def from_token(cls, token: Token) -> LexError:
        """Build a LexError from an ERROR token."""
        return cls(
            token.value,
            offset=token.pos,
            lineno=token.lineno,
            col_offset=token.col,
            source_file=token.location.source_file,
        )

"""Comment scanner mixin."""

from __future__ import annotations

from csslex.errors import ErrorCode
from csslex.lexer.modes import CLOSE_COMMENT, OPEN_COMMENT, LexerState, StateResult
from csslex.tokens import Token


class CommentScannerMixin:
    """Mixin providing the COMMENT state.

    Comments are dropped without a token and do not change rule state:
    the scanner resumes whichever state ran before it.

    """

    _source: str
    _pos: int
    _width: int
    _state: LexerState | None

    def _ignore(self) -> None:
        raise NotImplementedError

    def _fail(self, code: ErrorCode) -> Token:
        raise NotImplementedError

    def _lex_comment(self) -> StateResult:
        """Skip a ``/* ... */`` comment."""
        self._pos += len(OPEN_COMMENT)
        self._width = 0
        idx = self._source.find(CLOSE_COMMENT, self._pos)
        if idx < 0:
            yield self._fail(ErrorCode.UNCLOSED_COMMENT)
            return None
        self._pos = idx + len(CLOSE_COMMENT)
        self._ignore()
        return self._state

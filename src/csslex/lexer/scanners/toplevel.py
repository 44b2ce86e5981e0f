"""Top-level (between rules) scanner mixin."""

from __future__ import annotations

from csslex.lexer.modes import (
    AT_RULE_START,
    CLOSE_BLOCK,
    EOF,
    OPEN_COMMENT,
    SPACE_SET,
    LexerState,
    StateResult,
)
from csslex.tokens import Token, TokenType


class TopLevelScannerMixin:
    """Mixin providing the ANY state.

    Skips whitespace, closes at-rule blocks, and hands off to the comment,
    at-rule or selector scanner depending on the next character.

    """

    _source: str
    _pos: int
    _in_block: bool
    _in_at_block: bool

    def _next(self) -> str:
        raise NotImplementedError

    def _backup(self) -> None:
        raise NotImplementedError

    def _ignore(self) -> None:
        raise NotImplementedError

    def _emit(self, token_type: TokenType) -> Token:
        raise NotImplementedError

    def _lex_any(self) -> StateResult:
        """Scan between rules until the start of the next construct."""
        while True:
            char = self._next()
            if char == EOF:
                return None
            if char in SPACE_SET:
                self._ignore()
                continue
            # A bare } here closes the enclosing at-rule block
            if char == CLOSE_BLOCK and self._in_at_block and not self._in_block:
                self._in_at_block = False
                self._ignore()
                yield self._emit(TokenType.AT_RULE_BLOCK_END)
                continue
            self._backup()
            if self._source.startswith(OPEN_COMMENT, self._pos):
                return LexerState.COMMENT
            if char == AT_RULE_START:
                return LexerState.AT_RULE_IDENT
            return LexerState.SELECTOR

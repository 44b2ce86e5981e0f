"""At-rule scanner mixin."""

from __future__ import annotations

from csslex.config import LexConfig
from csslex.errors import ErrorCode
from csslex.lexer.modes import (
    AT_RULE_START,
    AT_RULE_STOPS,
    EOF,
    OPEN_BLOCK,
    SPACE_SET,
    LexerState,
    StateResult,
)
from csslex.tokens import Token, TokenType


class AtRuleScannerMixin:
    """Mixin providing the AT_RULE_IDENT and AT_RULE states.

    ``@import url(x) print;`` lexes as AT_RULE_IDENT + AT_RULE_BODY.
    ``@media print { ... }`` lexes as AT_RULE_IDENT + AT_RULE_BLOCK_START,
    the ordinary rules inside, then AT_RULE_BLOCK_END.

    """

    _source: str
    _source_len: int
    _pos: int
    _width: int
    _in_at_block: bool
    _config: LexConfig

    def _next(self) -> str:
        raise NotImplementedError

    def _ignore_space(self) -> None:
        raise NotImplementedError

    def _scan_until(self, stops: frozenset[str]) -> str:
        raise NotImplementedError

    def _emit(self, token_type: TokenType) -> Token:
        raise NotImplementedError

    def _fail(self, code: ErrorCode) -> Token:
        raise NotImplementedError

    def _lex_at_rule_ident(self) -> StateResult:
        """Scan ``@`` and the identifier up to the first whitespace."""
        ident_start = self._pos + len(AT_RULE_START)
        end = ident_start
        while end < self._source_len and self._source[end] not in SPACE_SET:
            end += 1
        if end >= self._source_len or end == ident_start:
            yield self._fail(ErrorCode.MISSING_AT_RULE_IDENT)
            return None

        self._pos = end
        self._width = 0
        yield self._emit(TokenType.AT_RULE_IDENT)
        self._ignore_space()
        return LexerState.AT_RULE

    def _lex_at_rule(self) -> StateResult:
        """Scan the at-rule prelude up to ``;`` or ``{``."""
        stop = self._scan_until(AT_RULE_STOPS)
        if stop == EOF:
            if self._config.strict_at_rule_body:
                yield self._fail(ErrorCode.MISSING_AT_RULE_BODY)
            else:
                yield self._emit(TokenType.AT_RULE_BODY)
            return None

        if stop == OPEN_BLOCK:
            self._in_at_block = True
            yield self._emit(TokenType.AT_RULE_BLOCK_START)
            # The block holds ordinary rules
            next_state = LexerState.SELECTOR
        else:
            yield self._emit(TokenType.AT_RULE_BODY)
            next_state = LexerState.ANY

        self._next()
        self._ignore_space()
        return next_state

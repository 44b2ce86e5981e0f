"""Selector and declaration block scanner mixin."""

from __future__ import annotations

from csslex.config import LexConfig
from csslex.errors import ErrorCode
from csslex.lexer.modes import (
    BLOCK_STOPS,
    CLOSE_BLOCK,
    EOF,
    RULE_SEP,
    SELECTOR_SEP,
    SELECTOR_STOPS,
    SPACE_CHARS,
    LexerState,
    StateResult,
)
from csslex.tokens import Token, TokenType
from csslex.utils.logger import get_logger

logger = get_logger(__name__)


class RuleScannerMixin:
    """Mixin providing the SELECTOR and BLOCK states.

    A selector list is emitted as one SELECTOR token per comma-separated
    part, all of them sharing the block that follows. Inside the block,
    each ``;``-terminated statement with a colon becomes a DECLARATION.

    """

    _start: int
    _in_block: bool
    _config: LexConfig

    def _next(self) -> str:
        raise NotImplementedError

    def _ignore(self) -> None:
        raise NotImplementedError

    def _ignore_space(self) -> None:
        raise NotImplementedError

    def _scan_until(self, stops: frozenset[str]) -> str:
        raise NotImplementedError

    def _pending(self) -> str:
        raise NotImplementedError

    def _emit(self, token_type: TokenType) -> Token:
        raise NotImplementedError

    def _fail(self, code: ErrorCode) -> Token:
        raise NotImplementedError

    def _lex_selector(self) -> StateResult:
        """Scan one selector up to ``,`` or ``{``."""
        stop = self._scan_until(SELECTOR_STOPS)
        if stop == EOF:
            if self._config.strict_selectors:
                yield self._fail(ErrorCode.UNTERMINATED_SELECTOR)
                return None
            logger.debug(
                "dropping trailing selector %r at offset %d",
                self._pending().strip(SPACE_CHARS),
                self._start,
            )
            return None

        yield self._emit(TokenType.SELECTOR)
        if stop == SELECTOR_SEP:
            next_state = LexerState.SELECTOR
        else:
            self._in_block = True
            yield self._emit(TokenType.BLOCK_START)
            next_state = LexerState.BLOCK

        self._next()
        self._ignore_space()
        return next_state

    def _lex_block(self) -> StateResult:
        """Scan one block statement up to ``;`` or ``}``."""
        stop = self._scan_until(BLOCK_STOPS)
        if stop == EOF:
            yield self._fail(ErrorCode.UNCLOSED_BLOCK)
            return None

        if RULE_SEP in self._pending():
            yield self._emit(TokenType.DECLARATION)
        else:
            # Empty or colon-less statement
            self._ignore()

        if stop == CLOSE_BLOCK:
            self._in_block = False
            yield self._emit(TokenType.BLOCK_END)
            next_state = LexerState.ANY
        else:
            next_state = LexerState.BLOCK

        self._next()
        self._ignore_space()
        return next_state

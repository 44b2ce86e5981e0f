"""State-machine lexer for CSS source text.

Holds a cursor over the input and the active LexerState, and drives
state transitions until the input is exhausted or an ERROR token is
produced. Each state is a generator method: it yields tokens and
returns the next state, or None to end the run.

No regex anywhere. Tokens are yielded as they are found, so consumers
pull one at a time and the lexer suspends in between.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from csslex.config import LexConfig, get_lex_config
from csslex.errors import ErrorCode
from csslex.lexer.modes import (
    CLOSE_COMMENT,
    EOF,
    ESCAPE_CHAR,
    GROUP_PAIRS,
    OPEN_COMMENT,
    QUOTE_CHARS,
    SPACE_CHARS,
    SPACE_SET,
    LexerState,
    StateResult,
)
from csslex.lexer.scanners import (
    AtRuleScannerMixin,
    CommentScannerMixin,
    RuleScannerMixin,
    TopLevelScannerMixin,
)
from csslex.location import LineIndex
from csslex.tokens import Token, TokenType
from csslex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    TopLevelScannerMixin,
    CommentScannerMixin,
    RuleScannerMixin,
    AtRuleScannerMixin,
):
    """State-machine CSS lexer.

    Usage:
            >>> lexer = Lexer("a{b:1}")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(SELECTOR, 'a', 0)
        Token(BLOCK_START, '', 1)
        Token(DECLARATION, 'b:1', 2)
        Token(BLOCK_END, '', 5)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_source_file",
        "_config",
        "_lines",
        "_start",  # Beginning of the pending span
        "_pos",  # Current scan position
        "_width",  # Width of the last _next(), 0 at end of input
        "_in_block",
        "_in_at_block",
        "_state",  # State that ran before the active one
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: CSS source text, already decoded
            source_file: Optional source file path for locations
            config: Lexing options (uses the context's LexConfig if None)
        """
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._config = config if config is not None else get_lex_config()
        self._lines = LineIndex(source)

        self._start = 0
        self._pos = 0
        self._width = 0
        self._in_block = False
        self._in_at_block = False
        self._state: LexerState | None = None

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time. After an ERROR token nothing
            else is yielded.

        Complexity: O(n) where n = len(source)
        """
        state: LexerState | None = LexerState.ANY
        while state is not None:
            prev = state
            state = yield from self._dispatch_state(state)
            self._state = prev

    def _dispatch_state(self, state: LexerState) -> StateResult:
        """Dispatch to the scanner for state."""
        if state == LexerState.ANY:
            return (yield from self._lex_any())
        elif state == LexerState.COMMENT:
            return (yield from self._lex_comment())
        elif state == LexerState.SELECTOR:
            return (yield from self._lex_selector())
        elif state == LexerState.BLOCK:
            return (yield from self._lex_block())
        elif state == LexerState.AT_RULE_IDENT:
            return (yield from self._lex_at_rule_ident())
        elif state == LexerState.AT_RULE:
            return (yield from self._lex_at_rule())
        raise ValueError(f"unknown lexer state: {state!r}")

    # =========================================================================
    # Cursor primitives
    # =========================================================================

    def _next(self) -> str:
        """Return the next character and advance, or EOF at end of input."""
        if self._pos >= self._source_len:
            self._width = 0
            return EOF
        char = self._source[self._pos]
        self._width = 1
        self._pos += 1
        return char

    def _backup(self) -> None:
        """Step back over the last character returned by _next().

        Can only be called once per call of _next(). A no-op when that
        call hit end of input.
        """
        self._pos -= self._width
        self._width = 0

    def _ignore(self) -> None:
        """Skip over the pending input before this point."""
        self._start = self._pos

    def _ignore_space(self) -> None:
        """Consume a run of whitespace and drop it from the pending span."""
        while self._next() in SPACE_SET:
            pass
        self._backup()
        self._ignore()

    def _scan_until(self, stops: frozenset[str]) -> str:
        """Advance until one of stops is next, without consuming it.

        With nesting tracked, stop characters inside comments, quoted
        strings and ``(...)``/``[...]`` groups are skipped over. Comment
        text stays in the pending span.

        Returns:
            The stop character found, or EOF.
        """
        track = self._config.track_nesting
        closers: list[str] = []
        quote = ""
        while True:
            char = self._next()
            if char == EOF:
                break
            if not track:
                if char in stops:
                    break
                continue
            if quote:
                if char == ESCAPE_CHAR:
                    self._next()
                elif char == quote:
                    quote = ""
                continue
            if self._source.startswith(OPEN_COMMENT, self._pos - 1):
                self._skip_comment()
            elif char in QUOTE_CHARS:
                quote = char
            elif char in GROUP_PAIRS:
                closers.append(GROUP_PAIRS[char])
            elif closers and char == closers[-1]:
                closers.pop()
            elif not closers and char in stops:
                break
        self._backup()
        return char

    def _skip_comment(self) -> None:
        """Move past a comment whose ``/`` was just read.

        An unclosed comment runs to end of input.
        """
        idx = self._source.find(CLOSE_COMMENT, self._pos + 1)
        self._pos = self._source_len if idx < 0 else idx + len(CLOSE_COMMENT)
        self._width = 0

    def _pending(self) -> str:
        """The untrimmed pending span."""
        return self._source[self._start : self._pos]

    # =========================================================================
    # Token construction
    # =========================================================================

    def _make_token(self, token_type: TokenType, value: str) -> Token:
        lineno, col = self._lines.line_col(self._start)
        return Token(
            token_type,
            value,
            self._start,
            _lineno=lineno,
            _col=col,
            _end_offset=self._pos,
            _source_file=self._source_file,
        )

    def _emit(self, token_type: TokenType) -> Token:
        """Build a token for the pending span and reset the span."""
        token = self._make_token(token_type, self._pending().strip(SPACE_CHARS))
        self._start = self._pos
        return token

    def _fail(self, code: ErrorCode) -> Token:
        """Build the ERROR token that ends the run.

        The caller yields it and returns None.
        """
        logger.debug(
            "lexing stopped at offset %d: %s", self._start, code.value
        )
        return self._make_token(TokenType.ERROR, code.value)

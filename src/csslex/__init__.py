"""
csslex: Streaming CSS Tokenizer for Python

Converts CSS source text into a flat stream of typed tokens (selectors,
declarations, block boundaries, at-rule parts) with a hand-written
state machine. No parse tree, no regular expressions, zero runtime
dependencies.

Quick Start:
    >>> from csslex import lex
    >>> for token in lex("a{b:1}c{d:2}"):
    ...     print(token.type.name, repr(token.value))
    SELECTOR 'a'
    BLOCK_START ''
    DECLARATION 'b:1'
    BLOCK_END ''
    SELECTOR 'c'
    BLOCK_START ''
    DECLARATION 'd:2'
    BLOCK_END ''

Errors:
    Malformed input ends the stream with a single ERROR token. Pass
    raise_on_error=True to tokenize() to get a LexError instead.

Installation:
    pip install csslex
"""

from collections.abc import Iterator

from csslex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from csslex.errors import CssLexError, ErrorCode, LexError
from csslex.lexer import Lexer, LexerState
from csslex.location import SourceLocation
from csslex.stream import TokenChannel, lex_channel
from csslex.tokens import Token, TokenType

__version__ = "0.1.0"


def lex(
    source: str,
    *,
    source_file: str | None = None,
    config: LexConfig | None = None,
) -> Iterator[Token]:
    """Lex CSS source into a lazy token stream.

    Args:
        source: CSS source text, already decoded
        source_file: Optional source file path for token locations
        config: Lexing options (uses the context's LexConfig if None)

    Returns:
        Iterator yielding tokens in source order. If an ERROR token is
        yielded it is the last one.

    """
    return Lexer(source, source_file, config).tokenize()


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    config: LexConfig | None = None,
    raise_on_error: bool = False,
) -> list[Token]:
    """Lex CSS source and return all tokens as a list.

    Args:
        source: CSS source text, already decoded
        source_file: Optional source file path for token locations
        config: Lexing options (uses the context's LexConfig if None)
        raise_on_error: Raise LexError instead of returning a stream
            that ends in an ERROR token

    Raises:
        LexError: If raise_on_error is set and lexing failed.

    Example:
        >>> [t.value for t in tokenize("@x y;")]
        ['@x', 'y']

    """
    tokens = list(lex(source, source_file=source_file, config=config))
    if raise_on_error and tokens and tokens[-1].is_error:
        raise LexError.from_token(tokens[-1])
    return tokens


__all__ = [
    # Main API
    "lex",
    "tokenize",
    "lex_channel",
    # Lexer
    "Lexer",
    "LexerState",
    "Token",
    "TokenType",
    "TokenChannel",
    "SourceLocation",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Errors
    "CssLexError",
    "LexError",
    "ErrorCode",
    # Version
    "__version__",
]

"""State-machine lexer for CSS source text.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerState
├── core.py              # Lexer class (cursor primitives + state dispatch)
├── modes.py             # LexerState enum, character constants
└── scanners/            # State scanners
    ├── toplevel.py      # ANY
    ├── comment.py       # COMMENT
    ├── rule.py          # SELECTOR, BLOCK
    └── at_rule.py       # AT_RULE_IDENT, AT_RULE

Usage:
    >>> from csslex.lexer import Lexer
    >>> for token in Lexer("@x y;").tokenize():
    ...     print(token)
Token(AT_RULE_IDENT, '@x', 0)
Token(AT_RULE_BODY, 'y', 3)

"""

from csslex.lexer.core import Lexer
from csslex.lexer.modes import LexerState

__all__ = ["Lexer", "LexerState"]

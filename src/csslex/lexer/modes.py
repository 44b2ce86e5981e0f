"""Lexer states and character constants.

This module defines the finite state machine states for the lexer
and the character sets the state scanners stop on.
"""

from __future__ import annotations

from collections.abc import Generator
from enum import Enum, auto

from csslex.tokens import Token


class LexerState(Enum):
    """Lexer states.

    The lexer moves between states based on the input:
    - ANY: Between rules, deciding what comes next
    - COMMENT: At a ``/*`` comment opener
    - SELECTOR: Scanning a selector (or one part of a selector list)
    - BLOCK: Inside ``{...}`` of a regular rule, scanning declarations
    - AT_RULE_IDENT: At an ``@`` keyword
    - AT_RULE: Scanning an at-rule prelude up to ``;`` or ``{``

    """

    ANY = auto()
    COMMENT = auto()
    SELECTOR = auto()
    BLOCK = auto()
    AT_RULE_IDENT = auto()
    AT_RULE = auto()


# Yields tokens, returns the next state (None ends the run)
StateResult = Generator[Token, None, LexerState | None]


# Returned by Lexer._next() at end of input
EOF = ""

OPEN_COMMENT = "/*"
CLOSE_COMMENT = "*/"
AT_RULE_START = "@"
SELECTOR_SEP = ","
DECL_SEP = ";"
RULE_SEP = ":"
OPEN_BLOCK = "{"
CLOSE_BLOCK = "}"

# Trim set for token values; SPACE_SET for membership, since EOF is ""
SPACE_CHARS = " \t\n\r"
SPACE_SET = frozenset(SPACE_CHARS)

# Stop sets for _scan_until
SELECTOR_STOPS = frozenset(",{")
BLOCK_STOPS = frozenset(";}")
AT_RULE_STOPS = frozenset(";{")

# Grouping characters honoured when nesting is tracked
QUOTE_CHARS = frozenset("\"'")
GROUP_PAIRS = {"(": ")", "[": "]"}
ESCAPE_CHAR = "\\"

"""State scanner mixins for the CSS lexer.

Each mixin owns one or two LexerState scanners. Cursor primitives and
token construction live on the Lexer class in core.py.
"""

from csslex.lexer.scanners.at_rule import AtRuleScannerMixin
from csslex.lexer.scanners.comment import CommentScannerMixin
from csslex.lexer.scanners.rule import RuleScannerMixin
from csslex.lexer.scanners.toplevel import TopLevelScannerMixin

__all__ = [
    "AtRuleScannerMixin",
    "CommentScannerMixin",
    "RuleScannerMixin",
    "TopLevelScannerMixin",
]

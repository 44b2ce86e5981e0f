"""Lex a stylesheet and print its tokens with no configuration."""

from csslex import lex

for token in lex("@media print { body { font-size: 10pt } }"):
    print(token.type.name, repr(token.value), token.pos)

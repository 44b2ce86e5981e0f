"""Fold the token stream into a selector -> declarations map."""

import json

from csslex import LexError, TokenType, lex

CSS = """
/* comment **/
@import url('style.css') print;
body {
  background-color: white;
  color: #222
}
div p,
  #id:first-line {
    white-space: nowrap; }
@media print {
  body { font-size: 10pt }
}
.c1{color:red}.c2{color:blue}
"""

style: dict[str, dict[str, str]] = {}
skip = False
selectors: list[str] = []
for token in lex(CSS):
    if token.type == TokenType.ERROR:
        raise LexError.from_token(token)
    if token.type == TokenType.AT_RULE_BLOCK_START:
        skip = True
    elif token.type == TokenType.AT_RULE_BLOCK_END:
        skip = False
    elif token.type == TokenType.BLOCK_END:
        selectors = []
    elif token.type == TokenType.SELECTOR and not skip:
        selectors.append(token.value)
        style.setdefault(token.value, {})
    elif token.type == TokenType.DECLARATION and not skip and selectors:
        prop, _, value = token.value.partition(":")
        for sel in selectors:
            style[sel][prop.strip()] = value.strip()

print(json.dumps(style, indent=2, sort_keys=True))

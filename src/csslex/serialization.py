"""Token serialization: JSON round-trip for csslex token streams.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Storing expected token streams as test fixtures
- Sending token streams to other processes
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from csslex import tokenize
    from csslex.serialization import to_json, from_json

    tokens = tokenize("a{b:1}")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from csslex.tokens import Token, TokenType


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict."""
    d: dict[str, Any] = {
        "type": token.type.name,
        "value": token.value,
        "pos": token.pos,
        "lineno": token.lineno,
        "col": token.col,
    }
    if token._end_offset is not None:
        d["end_offset"] = token._end_offset
    if token._source_file is not None:
        d["source_file"] = token._source_file
    return d


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by to_dict().

    Raises:
        ValueError: If the dict names an unknown token type.
    """
    type_name = data["type"]
    try:
        token_type = TokenType[type_name]
    except KeyError:
        raise ValueError(f"Unknown token type: {type_name!r}") from None
    return Token(
        token_type,
        data["value"],
        data["pos"],
        _lineno=data.get("lineno", 1),
        _col=data.get("col", 1),
        _end_offset=data.get("end_offset"),
        _source_file=data.get("source_file"),
    )


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token stream to a JSON array."""
    return json.dumps(
        [to_dict(t) for t in tokens], sort_keys=True, indent=indent, ensure_ascii=False
    )


def from_json(json_str: str) -> list[Token]:
    """Deserialize a token stream produced by to_json()."""
    return [from_dict(d) for d in json.loads(json_str)]

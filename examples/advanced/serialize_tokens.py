"""Store a token stream as JSON and restore it."""

from csslex import tokenize
from csslex.serialization import from_json, to_json

tokens = tokenize("a, b { color: red }\n@import url(x.css);", source_file="demo.css")

json_str = to_json(tokens, indent=2)
restored = from_json(json_str)

print("Original == restored:", tokens == restored)
print("JSON length:", len(json_str), "chars")

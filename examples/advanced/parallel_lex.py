"""Thread safe: lex 1000 stylesheets in parallel."""

from concurrent.futures import ThreadPoolExecutor

from csslex import tokenize

sheets = [f".item-{i} {{ width: {i}px; }}" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(tokenize, sheets))

print(f"Lexed {len(results)} stylesheets in parallel")
print("First sheet tokens:", len(results[0]))
print("Last selector:", results[-1][0].value)

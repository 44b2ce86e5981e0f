"""Run the lexer on its own thread and stop early without leaking it."""

from csslex import TokenType, lex_channel

css = "".join(f".rule-{i} {{ color: red; }}\n" for i in range(10_000))

with lex_channel(css) as channel:
    for token in channel:
        if token.type == TokenType.SELECTOR and token.value == ".rule-3":
            print("found", token.value, "at", token.location)
            break

print("producer exited:", channel.join(timeout=1.0))

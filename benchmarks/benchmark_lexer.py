"""Benchmark lexing throughput.

Run with:
    pytest benchmarks/benchmark_lexer.py -v --benchmark-only
"""

import pytest

from csslex import LexConfig, lex, tokenize
from csslex.stream import lex_channel


@pytest.mark.benchmark(group="lex")
def test_benchmark_tokenize_large(benchmark, large_stylesheet):
    """Benchmark materializing every token of a large stylesheet."""
    tokens = benchmark(tokenize, large_stylesheet)
    assert tokens


@pytest.mark.benchmark(group="lex")
def test_benchmark_tokenize_literal_scan(benchmark, large_stylesheet):
    """Benchmark with nesting tracking off (literal stop characters)."""
    config = LexConfig(track_nesting=False)
    benchmark(tokenize, large_stylesheet, config=config)


@pytest.mark.benchmark(group="lex")
def test_benchmark_first_token(benchmark, large_stylesheet):
    """Time to first token: the generator does no upfront scanning."""
    benchmark(lambda: next(lex(large_stylesheet)))


@pytest.mark.benchmark(group="lex")
def test_benchmark_small_sheets(benchmark, real_world_sheets):
    """Benchmark many small stylesheets."""

    def lex_all():
        for sheet in real_world_sheets:
            tokenize(sheet)

    benchmark(lex_all)


@pytest.mark.benchmark(group="channel")
def test_benchmark_channel(benchmark, large_stylesheet):
    """Benchmark the thread-backed channel against the same input."""

    def consume():
        with lex_channel(large_stylesheet) as channel:
            return sum(1 for _ in channel)

    benchmark(consume)

"""Tests for the lexer's cursor primitives.

These drive the private helpers directly so that end-of-input handling
of retreat and whitespace skipping is pinned down independently of the
state scanners.
"""

from __future__ import annotations

from csslex.config import LexConfig
from csslex.lexer import Lexer
from csslex.lexer.modes import BLOCK_STOPS, EOF, SELECTOR_STOPS
from csslex.tokens import TokenType


class TestNextAndBackup:
    """Advance and single-step retreat."""

    def test_next_returns_characters_in_order(self) -> None:
        lexer = Lexer("ab")

        assert lexer._next() == "a"
        assert lexer._next() == "b"
        assert lexer._pos == 2

    def test_next_at_end_does_not_advance(self) -> None:
        lexer = Lexer("a")
        lexer._next()

        assert lexer._next() == EOF
        assert lexer._next() == EOF
        assert lexer._pos == 1

    def test_backup_undoes_one_step(self) -> None:
        lexer = Lexer("abc")
        lexer._next()
        lexer._next()
        lexer._backup()

        assert lexer._pos == 1

    def test_backup_after_eof_is_noop(self) -> None:
        lexer = Lexer("ab")
        lexer._next()
        lexer._next()
        lexer._next()
        lexer._backup()

        assert lexer._pos == 2

    def test_backup_twice_only_moves_once(self) -> None:
        lexer = Lexer("abc")
        lexer._next()
        lexer._next()
        lexer._backup()
        lexer._backup()

        assert lexer._pos == 1

    def test_non_ascii_is_one_position(self) -> None:
        lexer = Lexer("é{")

        assert lexer._next() == "é"
        assert lexer._pos == 1


class TestIgnore:
    """Skipping pending input."""

    def test_ignore_drops_pending(self) -> None:
        lexer = Lexer("abc")
        lexer._next()
        lexer._next()
        lexer._ignore()

        assert lexer._start == 2
        assert lexer._pending() == ""

    def test_ignore_space_stops_before_text(self) -> None:
        lexer = Lexer(" \t\r\n x")
        lexer._ignore_space()

        assert lexer._pos == 5
        assert lexer._start == 5

    def test_ignore_space_at_end_of_input(self) -> None:
        lexer = Lexer("   ")
        lexer._ignore_space()

        assert lexer._pos == 3
        assert lexer._start == 3

    def test_ignore_space_without_space(self) -> None:
        lexer = Lexer("x")
        lexer._ignore_space()

        assert lexer._pos == 0


class TestScanUntil:
    """Scanning to a stop character."""

    def test_stops_before_stop_character(self) -> None:
        lexer = Lexer("ab,c")

        assert lexer._scan_until(SELECTOR_STOPS) == ","
        assert lexer._pos == 2
        assert lexer._pending() == "ab"

    def test_returns_eof_when_no_stop(self) -> None:
        lexer = Lexer("abc")

        assert lexer._scan_until(SELECTOR_STOPS) == EOF
        assert lexer._pos == 3

    def test_stop_character_first(self) -> None:
        lexer = Lexer("}x")

        assert lexer._scan_until(BLOCK_STOPS) == "}"
        assert lexer._pos == 0

    def test_skips_stops_in_parens(self) -> None:
        lexer = Lexer("url(a;b);c")

        assert lexer._scan_until(BLOCK_STOPS) == ";"
        assert lexer._pending() == "url(a;b)"

    def test_skips_stops_in_nested_groups(self) -> None:
        lexer = Lexer("f(g([;]));")

        assert lexer._scan_until(BLOCK_STOPS) == ";"
        assert lexer._pos == 9

    def test_skips_stops_in_quotes(self) -> None:
        lexer = Lexer("'a;b' \"c}\";")

        assert lexer._scan_until(BLOCK_STOPS) == ";"
        assert lexer._pos == 10

    def test_unbalanced_group_runs_to_eof(self) -> None:
        lexer = Lexer("url(a;b")

        assert lexer._scan_until(BLOCK_STOPS) == EOF
        assert lexer._pos == 7

    def test_literal_scan_without_nesting(self) -> None:
        lexer = Lexer("url(a;b);c", config=LexConfig(track_nesting=False))

        assert lexer._scan_until(BLOCK_STOPS) == ";"
        assert lexer._pending() == "url(a"


class TestEmit:
    """Token construction from the pending span."""

    def test_emit_trims_and_resets(self) -> None:
        lexer = Lexer("  a b \n{")
        lexer._scan_until(SELECTOR_STOPS)
        token = lexer._emit(TokenType.SELECTOR)

        assert token.value == "a b"
        assert token.pos == 0
        assert lexer._start == lexer._pos == 7

    def test_emit_empty_span(self) -> None:
        lexer = Lexer("{")
        token = lexer._emit(TokenType.BLOCK_START)

        assert token.value == ""
        assert token.pos == 0

    def test_emit_records_end_offset(self) -> None:
        lexer = Lexer("abc,")
        lexer._scan_until(SELECTOR_STOPS)
        token = lexer._emit(TokenType.SELECTOR)

        assert token.location.end_offset == 3

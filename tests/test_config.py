"""Tests for ContextVar-based lexing configuration.

Validates the frozen dataclass, thread isolation, context manager
behavior, and that each option changes lexing as documented.
"""

from threading import Thread

import pytest

from csslex import (
    LexConfig,
    Lexer,
    TokenType,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
    tokenize,
)


class TestLexConfigDataclass:
    """Test LexConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = LexConfig()
        assert config.strict_at_rule_body is True
        assert config.strict_selectors is False
        assert config.track_nesting is True

    def test_immutability(self) -> None:
        config = LexConfig()
        with pytest.raises(AttributeError):
            config.strict_selectors = True  # type: ignore[misc]

    def test_equality(self) -> None:
        assert LexConfig(track_nesting=False) == LexConfig(track_nesting=False)


class TestLexConfigFromDict:
    """Test LexConfig.from_dict() factory method."""

    def test_from_dict_basic(self) -> None:
        config = LexConfig.from_dict({"strict_selectors": True})

        assert config.strict_selectors is True
        assert config.strict_at_rule_body is True

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LexConfig.from_dict({"track_nesting": False, "unknown_key": 42})

        assert config.track_nesting is False

    def test_from_dict_empty(self) -> None:
        assert LexConfig.from_dict({}) == LexConfig()


class TestContextVarAccess:
    """get/set/reset and the context manager."""

    def setup_method(self) -> None:
        reset_lex_config()

    def teardown_method(self) -> None:
        reset_lex_config()

    def test_default_config(self) -> None:
        assert get_lex_config() == LexConfig()

    def test_set_and_reset(self) -> None:
        set_lex_config(LexConfig(strict_selectors=True))
        assert get_lex_config().strict_selectors is True

        reset_lex_config()
        assert get_lex_config().strict_selectors is False

    def test_context_manager_restores(self) -> None:
        with lex_config_context(LexConfig(track_nesting=False)):
            assert get_lex_config().track_nesting is False
        assert get_lex_config().track_nesting is True

    def test_context_manager_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with lex_config_context(LexConfig(track_nesting=False)):
                raise RuntimeError("boom")
        assert get_lex_config().track_nesting is True

    def test_lexer_reads_context_config(self) -> None:
        with lex_config_context(LexConfig(strict_at_rule_body=False)):
            tokens = tokenize("@charset x")
        assert tokens[-1].type == TokenType.AT_RULE_BODY

    def test_explicit_config_wins(self) -> None:
        with lex_config_context(LexConfig(strict_at_rule_body=False)):
            tokens = tokenize("@charset x", config=LexConfig())
        assert tokens[-1].type == TokenType.ERROR

    def test_config_captured_at_construction(self) -> None:
        with lex_config_context(LexConfig(strict_at_rule_body=False)):
            lexer = Lexer("@charset x")
        tokens = list(lexer.tokenize())
        assert tokens[-1].type == TokenType.AT_RULE_BODY

    def test_thread_isolation(self) -> None:
        """A config set in another thread does not leak into this one."""
        seen: list[bool] = []

        def worker() -> None:
            set_lex_config(LexConfig(strict_selectors=True))
            seen.append(get_lex_config().strict_selectors)

        t = Thread(target=worker)
        t.start()
        t.join()

        assert seen == [True]
        assert get_lex_config().strict_selectors is False


class TestOptionEffects:
    """Each option changes the token stream as documented."""

    def test_strict_at_rule_body(self) -> None:
        strict = tokenize("@namespace svg url(x)")
        lenient = tokenize("@namespace svg url(x)", config=LexConfig(strict_at_rule_body=False))

        assert strict[-1].value == "missing at-rule body"
        assert lenient[-1].type == TokenType.AT_RULE_BODY
        assert lenient[-1].value == "svg url(x)"

    def test_lenient_body_with_trailing_space(self) -> None:
        tokens = tokenize("@charset   ", config=LexConfig(strict_at_rule_body=False))

        assert [(t.type, t.value) for t in tokens] == [
            (TokenType.AT_RULE_IDENT, "@charset"),
            (TokenType.AT_RULE_BODY, ""),
        ]

    def test_track_nesting_off(self) -> None:
        source = "a{background: url(x;y); c: d}"
        config = LexConfig(track_nesting=False)

        decls = [t.value for t in tokenize(source, config=config) if t.type == TokenType.DECLARATION]
        assert decls == ["background: url(x", "c: d"]

    def test_track_nesting_on(self) -> None:
        source = "a{background: url(x;y); c: d}"

        decls = [t.value for t in tokenize(source) if t.type == TokenType.DECLARATION]
        assert decls == ["background: url(x;y)", "c: d"]

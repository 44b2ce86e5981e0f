"""ContextVar-based lexing configuration for csslex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config once, at construction, unless it is
given one explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from csslex.config import LexConfig, lex_config_context
    from csslex import lex

    with lex_config_context(LexConfig(strict_at_rule_body=False)):
        tokens = list(lex("@charset 'utf-8'"))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexing configuration.

    Attributes:
        strict_at_rule_body: An at-rule running to end of input without
            ``;`` or ``{`` is an error. When False, the remainder is
            emitted as AT_RULE_BODY instead.
        strict_selectors: A trailing selector with no block is an error.
            When False (default) it is dropped.
        track_nesting: Stop characters inside quoted strings and
            ``(...)``/``[...]`` groups do not end a selector,
            declaration or at-rule prelude.

    """

    strict_at_rule_body: bool = True
    strict_selectors: bool = False
    track_nesting: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> LexConfig.from_dict({"strict_selectors": True, "x": 1})
            LexConfig(strict_at_rule_body=True, strict_selectors=True, track_nesting=True)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexing configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexing configuration for current context."""
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(strict_selectors=True)):
        ...     get_lex_config().strict_selectors
        True

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]

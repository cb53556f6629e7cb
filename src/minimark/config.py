"""ContextVar-based configuration for minimark.

Provides thread-local parse configuration using Python's ContextVars (PEP 567),
plus the static settings the HTTP server is started with.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # In Markdown class
    md = Markdown(config=ParseConfig(legacy_eof=True))
    html = md("# Hello")  # Sets config internally via ContextVar

    # Direct lexer usage
    with parse_config_context(ParseConfig(legacy_eof=True)):
        tokens = list(Lexer(source).tokenize())

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        legacy_eof: Stop scanning one character before the true end of input,
            checked before each token. A final single-character line with no
            trailing newline is dropped.

    """

    legacy_eof: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ParseConfig:
        """Create ParseConfig from dictionary, ignoring unknown keys.

        Example:
            >>> ParseConfig.from_dict({"legacy_eof": True, "other": 1}).legacy_eof
            True

        """
        valid_fields = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in valid_fields})


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Settings for the Markdown HTTP server.

    Attributes:
        host: Interface to bind
        port: TCP port to bind (0 picks a free port)
        root: Directory that request paths are resolved against
        parse: Parse configuration applied to every rendered document

    """

    host: str = "127.0.0.1"
    port: int = 3001
    root: str = "."
    parse: ParseConfig = field(default_factory=ParseConfig)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ServerConfig:
        """Create ServerConfig from dictionary, ignoring unknown keys.

        A nested ``parse`` mapping is converted with ParseConfig.from_dict.
        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        parse = filtered.get("parse")
        if isinstance(parse, dict):
            filtered["parse"] = ParseConfig.from_dict(parse)
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "minimark_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Only affects the current thread's context.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the module-level default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(legacy_eof=True)):
        ...     get_parse_config().legacy_eof
        True

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "ServerConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]

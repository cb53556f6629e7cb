"""
minimark: a tiny Markdown dialect rendered to HTML fragments

Recognizes three block forms: ATX headings (``#`` to ``######``),
``-`` list items, and paragraph lines. No inline formatting, no nesting,
no escaping.

Quick Start:
    >>> from minimark import to_html
    >>> to_html("# Hello\\n\\nThis is text.\\n- one\\n- two")
    '<h1>Hello</h1><p>This is text.</p><ul><li>one</li><li>two</li></ul>'

    >>> # Or keep the two stages separate
    >>> from minimark import render, tokenize
    >>> tokens = tokenize("### Title")
    >>> tokens
    [Token(HEADING3, 'Title', 1:1)]
    >>> render(tokens)
    '<h3>Title</h3>'

Serving:
    python -m minimark serve --root docs --port 3001
"""

from collections.abc import Iterable

from minimark.config import (
    ParseConfig,
    ServerConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from minimark.errors import (
    DocumentError,
    DocumentNotFoundError,
    MinimarkError,
    UnsupportedDocumentError,
)
from minimark.lexer import Lexer
from minimark.renderers.html import HtmlRenderer
from minimark.tokens import Token, TokenType

__version__ = "0.1.0"

_RENDERER = HtmlRenderer()


def tokenize(source: str) -> list[Token]:
    """Tokenize Markdown source under the active ParseConfig.

    Args:
        source: Markdown source text

    Returns:
        One token per non-blank line, in source order. Empty for empty or
        whitespace-only input.
    """
    return list(Lexer(source).tokenize())


def render(tokens: Iterable[Token]) -> str:
    """Render tokens to an HTML fragment.

    Example:
        >>> render(tokenize("- a\\nparagraph\\n- b"))
        '<ul><li>a</li></ul><p>paragraph</p><ul><li>b</li></ul>'
    """
    return _RENDERER.render(tokens)


def to_html(source: str) -> str:
    """Tokenize and render Markdown source in one call."""
    return _RENDERER.render(Lexer(source).tokenize())


class Markdown:
    """Markdown processor bound to one ParseConfig.

    Usage:
        >>> md = Markdown()
        >>> md("## Hi")
        '<h2>Hi</h2>'

        >>> legacy = Markdown(config=ParseConfig(legacy_eof=True))
        >>> legacy("# Hi\\nx")
        '<h1>Hi</h1>'

    Thread Safety:
        Sets config via ContextVar (thread-local) for the duration of each
        call. Safe to share between threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(self, *, config: ParseConfig | None = None) -> None:
        self._config = config or ParseConfig()
        self._renderer = HtmlRenderer()

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Tokenize and render in one call."""
        return self._renderer.render(self.tokenize(source))

    def tokenize(self, source: str) -> list[Token]:
        """Tokenize source with this processor's config."""
        with parse_config_context(self._config):
            return list(Lexer(source).tokenize())

    def render(self, tokens: Iterable[Token]) -> str:
        """Render tokens to HTML."""
        return self._renderer.render(tokens)


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "tokenize",
    "render",
    "to_html",
    "Markdown",
    # Components
    "Lexer",
    "HtmlRenderer",
    "Token",
    "TokenType",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "ServerConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "MinimarkError",
    "DocumentError",
    "DocumentNotFoundError",
    "UnsupportedDocumentError",
]

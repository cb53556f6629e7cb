"""Single-pass line lexer for the minimark dialect.

The scanner walks the source once with a forward-only cursor:
skip whitespace, classify the line by its first character, consume
to end of line, emit one token. Blank lines never produce tokens.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from minimark.config import get_parse_config
from minimark.lexer.classifiers import HeadingClassifierMixin, ListClassifierMixin
from minimark.lexer.scanner import BlockScannerMixin
from minimark.tokens import Token, TokenType


class Lexer(
    # Classifiers (one per marker character)
    HeadingClassifierMixin,
    ListClassifierMixin,
    # Dispatch and paragraph fallback
    BlockScannerMixin,
):
    """Forward-only lexer producing one token per non-blank line.

    Usage:
            >>> for token in Lexer("# Hello\\n\\n- item\\nWorld").tokenize():
            ...     print(token)
        Token(HEADING1, 'Hello', 1:1)
        Token(LIST_ITEM, 'item', 3:1)
        Token(PARAGRAPH, 'World', 4:1)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_end",  # Scan bound checked before each token
        "_pos",
        "_lineno",
        "_col",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(self, source: str, *, legacy_eof: bool | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markdown source text
            legacy_eof: Stop one character before the end of input. Defaults to the
                value in the active ParseConfig.
        """
        if legacy_eof is None:
            legacy_eof = get_parse_config().legacy_eof

        self._source = source
        self._source_len = len(source)
        # Legacy bound: a token may not start on the last character
        self._end = self._source_len - 1 if legacy_eof else self._source_len
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._saved_lineno = 1
        self._saved_col = 1

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time, in source order

        Complexity: O(n) where n = len(source)
        """
        while True:
            self._skip_whitespace()
            if self._pos >= self._end:
                return
            yield self._scan_block()

    # =========================================================================
    # Cursor navigation
    # =========================================================================

    def _peek(self) -> str:
        """Current character, or empty string at end of input."""
        if self._pos >= self._source_len:
            return ""
        return self._source[self._pos]

    def _advance(self) -> str:
        """Advance position by one character, updating line/column."""
        if self._pos >= self._source_len:
            return ""

        char = self._source[self._pos]
        self._pos += 1

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        return char

    def _skip_whitespace(self) -> None:
        """Skip whitespace including newlines."""
        source = self._source
        while self._pos < self._source_len and source[self._pos].isspace():
            self._advance()

    def _skip_inline_whitespace(self) -> None:
        """Skip whitespace up to, but not across, the next newline."""
        source = self._source
        while self._pos < self._source_len:
            char = source[self._pos]
            if char == "\n" or not char.isspace():
                break
            self._pos += 1
            self._col += 1

    def _find_line_end(self) -> int:
        """Position of the next newline, or end of source."""
        idx = self._source.find("\n", self._pos)
        return idx if idx != -1 else self._source_len

    def _take_line(self) -> str:
        """Consume up to (not including) the next newline and return it."""
        line_end = self._find_line_end()
        line = self._source[self._pos : line_end]
        self._col += line_end - self._pos
        self._pos = line_end
        return line

    # =========================================================================
    # Token construction
    # =========================================================================

    def _save_location(self) -> None:
        """Remember where the current construct starts."""
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(self, token_type: TokenType, value: str) -> Token:
        """Create a Token at the saved location."""
        return Token(
            type=token_type,
            value=value,
            lineno=self._saved_lineno,
            col=self._saved_col,
        )

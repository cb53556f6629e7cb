"""ATX heading classifier mixin."""

from minimark.tokens import Token, TokenType, heading_type


class HeadingClassifierMixin:
    """Mixin providing ATX heading scanning."""

    def _peek(self) -> str:
        """Current character. Implemented by Lexer."""
        raise NotImplementedError

    def _advance(self) -> str:
        """Consume one character. Implemented by Lexer."""
        raise NotImplementedError

    def _skip_inline_whitespace(self) -> None:
        """Skip same-line whitespace. Implemented by Lexer."""
        raise NotImplementedError

    def _take_line(self) -> str:
        """Consume rest of line. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str) -> Token:
        """Create token at saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_atx_heading(self) -> Token:
        """Scan a line starting with ``#``.

        The run of ``#`` sets the level. No space is required after the run,
        and trailing ``#`` characters are kept as content. A run longer than
        six degrades to a TEXT token carrying the rest of the line.

        Returns:
            HEADING1..HEADING6 or TEXT token.
        """
        level = 0
        while self._peek() == "#":
            self._advance()
            level += 1

        self._skip_inline_whitespace()
        return self._make_token(heading_type(level), self._take_line().strip())

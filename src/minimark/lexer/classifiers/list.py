"""List item classifier mixin."""

from minimark.tokens import Token, TokenType

LIST_MARKER = "-"


class ListClassifierMixin:
    """Mixin providing list item scanning."""

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

    def _scan_list_item(self) -> Token:
        """Scan a line starting with ``-``.

        The marker and the whitespace after it are dropped, so ``- one``
        and ``-one`` both carry ``one``. Lines such as ``---`` are still
        list items here, carrying ``--``.
        """
        self._advance()
        self._skip_inline_whitespace()
        return self._make_token(TokenType.LIST_ITEM, self._take_line().strip())

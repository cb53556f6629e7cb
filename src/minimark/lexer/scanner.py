"""Block scanner mixin: line dispatch and paragraph fallback."""

from __future__ import annotations

from minimark.lexer.classifiers import LIST_MARKER
from minimark.tokens import Token, TokenType

HEADING_MARKER = "#"


class BlockScannerMixin:
    """Mixin providing block dispatch.

    Called with the cursor on the first non-whitespace character of a line.
    Every branch consumes at least that character, so the scan always
    advances.

    """

    def _peek(self) -> str:
        raise NotImplementedError

    def _save_location(self) -> None:
        raise NotImplementedError

    def _take_line(self) -> str:
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str) -> Token:
        raise NotImplementedError

    # Classifier methods (provided by classifier mixins)
    def _scan_atx_heading(self) -> Token:
        raise NotImplementedError

    def _scan_list_item(self) -> Token:
        raise NotImplementedError

    def _scan_block(self) -> Token:
        """Classify the current line and emit its token."""
        self._save_location()
        char = self._peek()

        if char == HEADING_MARKER:
            return self._scan_atx_heading()

        if char == LIST_MARKER:
            return self._scan_list_item()

        return self._make_token(TokenType.PARAGRAPH, self._take_line().strip())

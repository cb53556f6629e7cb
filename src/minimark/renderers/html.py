"""HTML renderer using StringBuilder pattern.

Maps a token stream to an HTML fragment in one indexed pass. Consecutive
LIST_ITEM tokens are grouped into a single ``<ul>`` by a two-state machine.

Output is a bare concatenation of elements: no document wrapper, no
newlines between elements, and token text inserted without escaping.

Thread Safety:
All per-render state lives in locals of render(). Multiple threads can
share a single HtmlRenderer instance.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum, auto

from minimark.stringbuilder import StringBuilder
from minimark.tokens import Token, TokenType
from minimark.utils.logger import get_logger

logger = get_logger(__name__)


class RenderState(Enum):
    """Renderer states.

    - NORMAL: Outside any list
    - IN_LIST: Inside an open ``<ul>``, emitting ``<li>`` per item

    """

    NORMAL = auto()
    IN_LIST = auto()


class HtmlRenderer:
    """Render a token stream to HTML.

    Usage:
        >>> from minimark.lexer import Lexer
        >>> tokens = list(Lexer("# Hi\\n- a\\n- b").tokenize())
        >>> HtmlRenderer().render(tokens)
        '<h1>Hi</h1><ul><li>a</li><li>b</li></ul>'

    """

    __slots__ = ()

    def render(self, tokens: Iterable[Token]) -> str:
        """Render tokens to an HTML string.

        Args:
            tokens: Token stream, typically from Lexer.tokenize()

        Returns:
            HTML fragment (empty string for an empty stream)
        """
        stream: Sequence[Token] = tokens if isinstance(tokens, Sequence) else tuple(tokens)
        sb = StringBuilder()
        state = RenderState.NORMAL

        i = 0
        count = len(stream)
        while i < count:
            token = stream[i]
            if token.type is TokenType.LIST_ITEM:
                if state is RenderState.NORMAL:
                    sb.append("<ul>")
                    state = RenderState.IN_LIST
                sb.element("li", token.value)
            else:
                if state is RenderState.IN_LIST:
                    sb.append("</ul>")
                    state = RenderState.NORMAL
                self._render_block(token, sb)
            i += 1

        # End of stream closes an open list
        if state is RenderState.IN_LIST:
            sb.append("</ul>")

        logger.debug("Rendered %d tokens into %d fragments", count, len(sb))
        return sb.build()

    def _render_block(self, token: Token, sb: StringBuilder) -> None:
        """Render a single non-list token."""
        level = token.level
        if level is not None:
            sb.element(f"h{level}", token.value)
        elif token.type is TokenType.PARAGRAPH:
            sb.element("p", token.value)
        else:
            # Degraded heading (TEXT) is emitted unwrapped
            sb.append(token.value)

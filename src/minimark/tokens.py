"""Token and TokenType definitions for the minimark lexer.

The lexer produces a stream of Token objects that the renderer consumes.
Each Token has a type, a trimmed value, and the position where its line starts.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer.

    The set is closed: every non-blank line classifies as exactly one of these.
    TEXT is the fallback for a run of seven or more ``#`` characters.

    """

    # Block elements - headings
    HEADING1 = auto()  # #
    HEADING2 = auto()  # ##
    HEADING3 = auto()  # ###
    HEADING4 = auto()  # ####
    HEADING5 = auto()  # #####
    HEADING6 = auto()  # ######

    # Block elements - other
    PARAGRAPH = auto()  # Any other line
    LIST_ITEM = auto()  # - item

    # Degraded heading (####### or longer), rendered unwrapped
    TEXT = auto()


HEADING_TYPES: tuple[TokenType, ...] = (
    TokenType.HEADING1,
    TokenType.HEADING2,
    TokenType.HEADING3,
    TokenType.HEADING4,
    TokenType.HEADING5,
    TokenType.HEADING6,
)

_HEADING_LEVELS: dict[TokenType, int] = {t: i for i, t in enumerate(HEADING_TYPES, 1)}


def heading_type(level: int) -> TokenType:
    """Map a ``#`` run length to its token type.

    Args:
        level: Number of consecutive ``#`` characters (>= 1)

    Returns:
        HEADING1..HEADING6 for 1-6, TEXT for anything longer.
    """
    if 1 <= level <= len(HEADING_TYPES):
        return HEADING_TYPES[level - 1]
    return TokenType.TEXT


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Line content with markers and surrounding whitespace removed
        lineno: Line number of the construct (1-indexed)
        col: Column of the construct's first character (1-indexed)

    """

    type: TokenType
    value: str
    lineno: int = 1
    col: int = 1

    @property
    def level(self) -> int | None:
        """Heading level 1-6, or None for non-heading tokens."""
        return _HEADING_LEVELS.get(self.type)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.lineno}:{self.col})"

"""Line lexer for the minimark Markdown dialect.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (mixin composition + cursor)
├── scanner.py           # Line dispatch and paragraph fallback
└── classifiers/
    ├── heading.py       # # through ######, degraded ####### and longer
    └── list.py          # - items

Usage:
    >>> from minimark.lexer import Lexer
    >>> list(Lexer("### Title").tokenize())
    [Token(HEADING3, 'Title', 1:1)]

"""

from minimark.lexer.core import Lexer

__all__ = ["Lexer"]

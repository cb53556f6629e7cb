"""Block-level classifiers for the minimark lexer.

Each classifier is a mixin that scans one block form, selected by the
first non-whitespace character of a line.
"""

from minimark.lexer.classifiers.heading import HeadingClassifierMixin
from minimark.lexer.classifiers.list import LIST_MARKER, ListClassifierMixin

__all__ = [
    "LIST_MARKER",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
]

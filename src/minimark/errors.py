"""Exception classes for minimark.

Tokenizing and rendering never raise. These exceptions belong to the
document layer that turns a request path into Markdown source.
"""

from __future__ import annotations


class MinimarkError(Exception):
    """Base exception for all minimark errors."""

    pass


class DocumentError(MinimarkError):
    """A requested document cannot be served.

    Attributes:
        path: The request path or filesystem path that was rejected
        message: Error description without the path prefix
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}" if path else message)


class DocumentNotFoundError(DocumentError):
    """The path does not name an existing file inside the document root."""

    pass


class UnsupportedDocumentError(DocumentError):
    """The path does not name a Markdown (``.md``) document."""

    pass


__all__ = [
    "DocumentError",
    "DocumentNotFoundError",
    "MinimarkError",
    "UnsupportedDocumentError",
]

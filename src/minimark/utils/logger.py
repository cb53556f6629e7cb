"""Logging helper for minimark.

Library modules only create loggers; handlers are configured by the
application (see minimark.cli).

Example:
    >>> from minimark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendered %d tokens", 3)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``minimark.``.

    Example:
        >>> get_logger("server").name
        'minimark.server'
        >>> get_logger("minimark.lexer.core").name
        'minimark.lexer.core'
    """
    if not (name == "minimark" or name.startswith("minimark.")):
        name = f"minimark.{name}"
    return logging.getLogger(name)

"""Utility modules for minimark.

Provides:
- logger: get_logger for namespaced logging
"""

from minimark.utils.logger import get_logger

__all__ = ["get_logger"]

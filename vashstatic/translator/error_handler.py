"""
Diagnostics for the rewrite pipeline.

Fatal problems are raised as exceptions from :mod:`vashstatic.core.errors`;
non-fatal ones are collected by :class:`RewriteWarnings` and handed back to
the caller alongside the rewritten text.
"""

from __future__ import annotations

from typing import Type

from vashstatic.core.logging import get_logger

logger = get_logger(__name__)

EXCERPT_LENGTH = 60


def excerpt(text: str, length: int = EXCERPT_LENGTH) -> str:
    """
    Shorten text for use in error messages.

    Args:
        text: Offending template text
        length: Maximum number of characters to keep

    Returns:
        Single-line excerpt, suffixed with '...' when truncated
    """
    flat = " ".join(text.split())
    if len(flat) <= length:
        return flat
    return flat[:length].rstrip() + "..."


class RewriteWarnings:
    """Warning tracker for a single rewrite call."""

    def __init__(self):
        self.messages: list[str] = []

    def warn(self, message: str, category: Type[Warning] = UserWarning) -> None:
        """
        Record a warning and log it.

        Args:
            message: Warning message
            category: Warning class, recorded with the log entry
        """
        self.messages.append(message)
        logger.warning(message, extra={"extra_data": {"category": category.__name__}})


"""Basic integer math used by MELP programs."""

from __future__ import annotations

__all__ = ["minimum", "maximum", "absolute"]


def minimum(a: int, b: int) -> int:
    """The smaller of two numbers."""
    return a if a < b else b


def maximum(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def absolute(x: int) -> int:
    """The absolute value of ``x``."""
    return -x if x < 0 else x
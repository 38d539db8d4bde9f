"""Fixed-size numeric arrays built on :class:`MelpList`."""

from __future__ import annotations

from typing import Optional

from melp_runtime.listtype import MelpList

__all__ = ["create_array", "array_get", "array_set"]


def create_array(size: int) -> MelpList:
    """An array of ``size`` zeros."""
    if size < 0:
        raise ValueError(f"array size must not be negative, got {size}")
    arr = MelpList()
    for _ in range(size):
        arr.append(0)
    return arr


def array_get(arr: Optional[MelpList], index: int) -> int:
    """The value at ``index``; a missing array reads as 0."""
    if arr is None:
        return 0
    return arr[index]


def array_set(arr: Optional[MelpList], index: int, value: int) -> None:
    """Store ``value`` at ``index``."""
    if arr is None:
        raise ValueError("cannot set an element of a missing array")
    arr[index] = value
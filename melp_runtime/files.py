"""Whole-file reading and writing for MELP programs."""

from __future__ import annotations

import os
from typing import Optional, Union

__all__ = ["read_file", "write_file", "append_file", "file_exists", "file_size"]

PathLike = Union[str, "os.PathLike[str]"]


def read_file(path: PathLike) -> str:
    """The whole content of the file at ``path``; raises ``OSError`` on failure."""
    with open(path, "r", encoding="utf-8", newline="") as handle:
        return handle.read()


def _write(path: PathLike, content: str, mode: str) -> None:
    if content is None:
        raise TypeError("content must be a string, not None")
    with open(path, mode, encoding="utf-8", newline="") as handle:
        handle.write(content)


def write_file(path: PathLike, content: str) -> None:
    """Replace the file at ``path`` with ``content``; raises ``OSError`` on failure."""
    _write(path, content, "w")


def append_file(path: PathLike, content: str) -> None:
    """Append ``content`` to the file at ``path``, creating it if needed."""
    _write(path, content, "a")


def file_exists(path: Optional[PathLike]) -> bool:
    """True when ``path`` names a file that can be opened for reading."""
    if path is None:
        return False
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def file_size(path: PathLike) -> int:
    """Size of the file in bytes; raises ``OSError`` when it cannot be opened."""
    with open(path, "rb") as handle:
        return handle.seek(0, os.SEEK_END)
"""String operations for the MELP runtime.

Every function returns a new value and never mutates its arguments.
``None`` stands for a missing string and is accepted wherever the
runtime tolerates one.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "concat",
    "compare",
    "equals",
    "not_equals",
    "length",
    "is_empty",
    "substring",
    "index_of",
    "char_at",
    "number_to_string",
    "double_to_string",
    "to_upper",
    "to_lower",
    "trim",
    "trim_start",
    "trim_end",
    "replace",
    "replace_all",
    "split",
]

_WHITESPACE = " \t\n\r"
_DOUBLE_BUFFER_LIMIT = 31

_ASCII_UPPER = {code: code - 32 for code in range(ord("a"), ord("z") + 1)}
_ASCII_LOWER = {code: code + 32 for code in range(ord("A"), ord("Z") + 1)}


def concat(*args: Optional[str]) -> str:
    """Join the given strings, treating ``None`` as the empty string."""
    return "".join(part for part in args if part is not None)


def compare(first: Optional[str], second: Optional[str]) -> int:
    """Compare lexicographically, returning -1, 0 or 1.

    ``None`` sorts before every string and equals only ``None``.
    """
    if first is None and second is None:
        return 0
    if first is None:
        return -1
    if second is None:
        return 1
    return (first > second) - (first < second)


def equals(first: Optional[str], second: Optional[str]) -> bool:
    """Return True when both strings compare equal."""
    return compare(first, second) == 0


def not_equals(first: Optional[str], second: Optional[str]) -> bool:
    """Return True when the strings differ."""
    return compare(first, second) != 0


def length(text: Optional[str]) -> int:
    """Length of the string; 0 for ``None``."""
    return len(text) if text is not None else 0


def is_empty(text: Optional[str]) -> bool:
    """True for ``None`` or the empty string."""
    return not text


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def substring(text: Optional[str], start: int, count: int) -> Optional[str]:
    """Return up to ``count`` characters starting at ``start``.

    A start past the end gives the empty string; ``None`` gives ``None``.
    """
    if text is None:
        return None
    _check_non_negative("start", start)
    _check_non_negative("count", count)
    if start >= len(text):
        return ""
    return text[start:start + count]


def index_of(text: Optional[str], sub: Optional[str]) -> int:
    """Index of the first occurrence of ``sub``, or -1."""
    if text is None or sub is None:
        return -1
    return text.find(sub)


def char_at(text: Optional[str], index: int) -> str:
    """The single character at ``index``, or the empty string when out of range."""
    if text is None or index < 0 or index >= len(text):
        return ""
    return text[index]


def number_to_string(number: int) -> str:
    """Decimal representation of an integer."""
    return str(int(number))


def double_to_string(number: float) -> str:
    """Format with six decimals, then drop trailing zeros and a bare point."""
    formatted = ("%.6f" % number)[:_DOUBLE_BUFFER_LIMIT]
    if "." in formatted:
        formatted = formatted.rstrip("0")
        if formatted.endswith("."):
            formatted = formatted[:-1]
    return formatted


def to_upper(text: Optional[str]) -> Optional[str]:
    """ASCII upper-casing; other characters are left alone."""
    return None if text is None else text.translate(_ASCII_UPPER)


def to_lower(text: Optional[str]) -> Optional[str]:
    """ASCII lower-casing; other characters are left alone."""
    return None if text is None else text.translate(_ASCII_LOWER)


def trim(text: Optional[str]) -> Optional[str]:
    """Strip spaces, tabs, newlines and carriage returns from both ends."""
    return None if text is None else text.strip(_WHITESPACE)


def trim_start(text: Optional[str]) -> Optional[str]:
    """Strip leading spaces, tabs, newlines and carriage returns."""
    return None if text is None else text.lstrip(_WHITESPACE)


def trim_end(text: Optional[str]) -> Optional[str]:
    """Strip trailing spaces, tabs, newlines and carriage returns."""
    return None if text is None else text.rstrip(_WHITESPACE)


def replace(text: Optional[str], old: Optional[str], new: Optional[str]) -> Optional[str]:
    """Replace the first occurrence of ``old`` with ``new``."""
    if text is None:
        return None
    if not old:
        return text
    return text.replace(old, new or "", 1)


def replace_all(text: Optional[str], old: Optional[str], new: Optional[str]) -> Optional[str]:
    """Replace every non-overlapping occurrence of ``old``, scanning left to right."""
    if text is None:
        return None
    if not old:
        return text
    return text.replace(old, new or "")


def split(text: Optional[str], delimiter: Optional[str]) -> list[str]:
    """Split on ``delimiter``, keeping empty parts.

    An empty delimiter yields the whole string as the only part; a
    missing string or delimiter yields no parts.
    """
    if text is None or delimiter is None:
        return []
    if delimiter == "":
        return [text]
    return text.split(delimiter)
"""Console output and input for MELP programs.

Numbers are printed in one of three internal kinds: 64-bit integers,
doubles (printed like C's ``%g``) and arbitrary-precision decimals.
"""

from __future__ import annotations

import enum
import sys
from decimal import Decimal
from typing import Any, Optional, TextIO

__all__ = [
    "NumericType",
    "format_numeric",
    "format_bool",
    "print_numeric",
    "print_string",
    "print_bool",
    "parse_int_prefix",
    "read_line",
    "read_numeric",
]

_LINE_LIMIT = 1023
_NUMERIC_LINE_LIMIT = 63
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_C_WHITESPACE = " \t\n\v\f\r"
_BOOL_TEXT = {True: "true", False: "false"}


class NumericType(enum.Enum):
    """The internal representation of a numeric value."""

    INT64 = "int64"
    DOUBLE = "double"
    BIGDECIMAL = "bigdecimal"


def _render(value: Any, kind: Any) -> Optional[str]:
    """Text for a known kind, or None when the kind is not recognised."""
    if kind is NumericType.INT64:
        return str(int(value))
    if kind is NumericType.DOUBLE:
        return "%g" % float(value)
    if kind is NumericType.BIGDECIMAL:
        return str(value if isinstance(value, Decimal) else Decimal(str(value)))
    return None


def format_numeric(value: Any, kind: Any = NumericType.INT64) -> str:
    """Convert a numeric value to text; ``None`` gives ``"null"``."""
    if value is None:
        return "null"
    rendered = _render(value, kind)
    return rendered if rendered is not None else "(unknown)"


def format_bool(value: Any) -> str:
    """``"true"`` for a truthy value, ``"false"`` otherwise."""
    return _BOOL_TEXT[bool(value)]


def _out(file: Optional[TextIO]) -> TextIO:
    return file if file is not None else sys.stdout


def print_numeric(
    value: Any,
    kind: Any = NumericType.INT64,
    end: str = "",
    file: Optional[TextIO] = None,
) -> None:
    """Write a numeric value followed by ``end``; ``None`` prints ``(null)``."""
    if value is None:
        text = "(null)"
    else:
        rendered = _render(value, kind)
        if rendered is None:
            label = kind.value if isinstance(kind, NumericType) else kind
            text = f"(unknown numeric type: {label})"
        else:
            text = rendered
    _out(file).write(text + end)


def print_string(text: Optional[str], end: str = "", file: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by ``end``.

    A missing string prints ``(null)`` when a line ending is requested and
    nothing otherwise.
    """
    if text is None:
        if end:
            _out(file).write("(null)" + end)
        return
    _out(file).write(text + end)


def print_bool(value: Any, end: str = "", file: Optional[TextIO] = None) -> None:
    """Write ``true`` or ``false`` followed by ``end``."""
    _out(file).write(format_bool(value) + end)


def parse_int_prefix(text: str) -> int:
    """Parse a leading decimal integer the way ``atoll`` does.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. No digits gives 0; the result saturates at the
    64-bit limits.
    """
    rest = text.lstrip(_C_WHITESPACE)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = ""
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits += char
    if not digits:
        return 0
    number = -int(digits) if negative else int(digits)
    return max(_INT64_MIN, min(_INT64_MAX, number))


def _prompt(prompt: Optional[str], stdout: Optional[TextIO]) -> None:
    if prompt is not None:
        out = _out(stdout)
        out.write(prompt)
        out.flush()


def read_line(
    prompt: Optional[str] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> str:
    """Read one line (at most 1023 characters) without its newline.

    End of input gives the empty string.
    """
    _prompt(prompt, stdout)
    source = stdin if stdin is not None else sys.stdin
    line = source.readline(_LINE_LIMIT)
    if line.endswith("\n"):
        line = line[:-1]
    return line


def read_numeric(
    prompt: Optional[str] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Read a line and parse its leading integer; end of input gives 0."""
    _prompt(prompt, stdout)
    source = stdin if stdin is not None else sys.stdin
    line = source.readline(_NUMERIC_LINE_LIMIT)
    if not line:
        return 0
    return parse_int_prefix(line)
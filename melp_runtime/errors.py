"""Runtime errors raised by MELP programs and the banner that reports them."""

from __future__ import annotations

import sys
from typing import NoReturn, Optional, TextIO

__all__ = [
    "MelpRuntimeError",
    "ArrayBoundsError",
    "runtime_error",
    "panic_array_bounds",
    "panic_division_by_zero",
    "report",
]

_RESET = "\033[0m"
_BOLD_RED = "\033[1;31m"
_RULE = "=" * 58
_UNKNOWN = "Unknown error"
_DIVISION_BY_ZERO = "Division by zero is not allowed!"


class MelpRuntimeError(Exception):
    """A fatal error in a running MELP program (process exit code 43)."""

    exit_code = 43
    title = "RUNTIME ERROR"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message if message is not None else _UNKNOWN
        self.details = [self.message]
        super().__init__(self.message)


class ArrayBoundsError(MelpRuntimeError, IndexError):
    """An array was indexed outside its valid range (process exit code 42)."""

    exit_code = 42
    title = "RUNTIME ERROR: Array Index Out of Bounds"

    def __init__(self, index: int, length: int, array_name: Optional[str] = None) -> None:
        name = array_name if array_name is not None else "(unknown)"
        self.index = index
        self.length = length
        self.array_name = name
        super().__init__(
            f"index {index} is out of bounds for array {name} of length {length}"
        )
        self.details = [
            f"Array: {name}",
            f"Index: {index}",
            f"Valid range: 0 to {length - 1}",
        ]


def runtime_error(message: Optional[str]) -> NoReturn:
    """Raise a generic runtime error with ``message``."""
    raise MelpRuntimeError(message)


def panic_array_bounds(index: int, length: int, array_name: Optional[str] = None) -> NoReturn:
    """Raise an array bounds error for ``index`` in an array of ``length``."""
    raise ArrayBoundsError(index, length, array_name)


def panic_division_by_zero() -> NoReturn:
    """Raise the runtime error used for division by zero."""
    runtime_error(_DIVISION_BY_ZERO)


def report(error: BaseException, stream: Optional[TextIO] = None) -> None:
    """Write the coloured error banner for ``error`` to ``stream`` (stderr by default)."""
    out = stream if stream is not None else sys.stderr
    if isinstance(error, MelpRuntimeError):
        title = error.title
        details = error.details
    else:
        title = MelpRuntimeError.title
        details = [str(error) or _UNKNOWN]
    rule = f"{_BOLD_RED}{_RULE}{_RESET}\n"
    out.write("\n")
    out.write(rule)
    out.write(f"{_BOLD_RED}{title}{_RESET}\n")
    out.write(rule)
    for line in details:
        out.write(f"{line}\n")
    out.write(rule)
    out.write("\n")
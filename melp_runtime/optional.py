"""Nullable values: an optional holds either a value or nothing."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

from melp_runtime.errors import runtime_error

__all__ = ["OptionalState", "MelpOptional", "coalesce"]

_DEFAULT_ASSERT_MESSAGE = "Null assertion failed: value is None"


class OptionalState(enum.IntEnum):
    """Whether an optional is empty or holds a value."""

    NONE = 0
    SOME = 1


@dataclass(frozen=True)
class MelpOptional:
    """An optional value; build one with :meth:`some` or :meth:`none`."""

    state: OptionalState = OptionalState.NONE
    value: Any = None

    def __post_init__(self) -> None:
        if self.state is OptionalState.NONE and self.value is not None:
            raise ValueError("an empty optional cannot hold a value")
        if self.state is OptionalState.SOME and self.value is None:
            raise ValueError("a present optional needs a value")

    @classmethod
    def some(cls, value: Any) -> "MelpOptional":
        """An optional holding ``value``, which must not be ``None``."""
        if value is None:
            raise ValueError("some() needs a value; use none() for an empty optional")
        return cls(OptionalState.SOME, value)

    @classmethod
    def none(cls) -> "MelpOptional":
        """An empty optional."""
        return cls(OptionalState.NONE, None)

    def has_value(self) -> bool:
        """True when a value is present."""
        return self.state is OptionalState.SOME

    def is_null(self) -> bool:
        """True when no value is present."""
        return not self.has_value()

    def get(self) -> Any:
        """The held value; a runtime error when empty."""
        if self.is_null():
            runtime_error("optional_get() called on None value")
        return self.value

    def get_or(self, default: Any) -> Any:
        """The held value, or ``default`` when empty."""
        return self.value if self.has_value() else default

    def expect(self, message: Optional[str] = None) -> Any:
        """The held value; a runtime error with ``message`` when empty."""
        if self.is_null():
            runtime_error(message if message is not None else _DEFAULT_ASSERT_MESSAGE)
        return self.value


def coalesce(left: Any, right: Any) -> Any:
    """The ``??`` operator: ``left`` unless it is missing, else ``right``.

    An optional on the left is unwrapped; an empty or absent one yields ``right``.
    """
    if isinstance(left, MelpOptional):
        return left.get_or(right)
    return left if left is not None else right
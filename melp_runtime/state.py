"""Key-value state store with optional persistence to a small JSON file."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Optional, Union

from melp_runtime.console import parse_int_prefix
from melp_runtime.files import read_file, write_file

__all__ = ["encode_state", "decode_state", "StateManager"]

DEFAULT_PERSIST_FILE = ".melp_state.json"

_KEY_LIMIT = 255
_VALUE_LIMIT = 4095
_SKIP_BEFORE_KEY = " \n\t{,"
_SKIP_BEFORE_VALUE = ": \t\n"

Pairs = Union[Mapping[str, str], Iterable[tuple[str, str]]]


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def encode_state(items: Pairs) -> str:
    """Render key-value pairs, in the given order, as the state file's JSON text.

    Keys are written as they are; in values only quotes and backslashes
    are escaped.
    """
    pairs = items.items() if isinstance(items, Mapping) else items
    body = ",\n".join(f'  "{key}": "{_escape(value)}"' for key, value in pairs)
    return "{\n" + body + "\n}\n"


def decode_state(text: str) -> list[tuple[str, str]]:
    """Parse the state file's JSON text into key-value pairs in file order.

    Parsing stops quietly at the first malformed entry, at a key longer
    than 255 characters or at a value longer than 4095 characters; the
    pairs read before that point are returned.
    """
    pairs: list[tuple[str, str]] = []
    size = len(text)
    pos = 0
    while pos < size:
        while pos < size and text[pos] in _SKIP_BEFORE_KEY:
            pos += 1
        if pos >= size or text[pos] == "}":
            break
        if text[pos] != '"':
            break
        pos += 1

        end = pos
        while end < size and text[end] != '"' and end - pos < _KEY_LIMIT:
            end += 1
        if end >= size or text[end] != '"':
            break
        key = text[pos:end]
        pos = end + 1

        while pos < size and text[pos] in _SKIP_BEFORE_VALUE:
            pos += 1
        if pos >= size or text[pos] != '"':
            break
        pos += 1

        chars: list[str] = []
        while pos < size and text[pos] != '"' and len(chars) < _VALUE_LIMIT:
            if text[pos] == "\\" and pos + 1 < size:
                pos += 1
            chars.append(text[pos])
            pos += 1
        if pos >= size or text[pos] != '"':
            break
        pos += 1
        pairs.append((key, "".join(chars)))
    return pairs


class StateManager:
    """In-memory string store that can save to and load from a file.

    Newly added keys come first in the saved file; updating a key keeps
    its place. With ``auto_persist`` every change is saved at once, and
    leaving the ``with`` block saves before closing.
    """

    def __init__(
        self,
        persist_file: str = DEFAULT_PERSIST_FILE,
        auto_persist: bool = False,
    ) -> None:
        self._entries: dict[str, str] = {}
        self.persist_file = persist_file
        self.auto_persist = bool(auto_persist)
        self._closed = False

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("state manager is closed")

    def _ordered(self) -> list[tuple[str, str]]:
        return list(reversed(self._entries.items()))

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        self._ensure_open()
        if key is None or value is None:
            raise TypeError("state keys and values must be strings, not None")
        self._entries[key] = value
        if self.auto_persist:
            self.save()

    def get(self, key: Optional[str]) -> str:
        """The value stored under ``key``, or the empty string."""
        self._ensure_open()
        if key is None:
            return ""
        return self._entries.get(key, "")

    def has(self, key: Optional[str]) -> bool:
        """True when ``key`` is stored."""
        self._ensure_open()
        return key is not None and key in self._entries

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def delete(self, key: Optional[str]) -> bool:
        """Remove ``key``; True when it was present."""
        self._ensure_open()
        if key is None or key not in self._entries:
            return False
        del self._entries[key]
        return True

    def clear(self) -> None:
        """Remove every entry."""
        self._ensure_open()
        self._entries.clear()

    def configure(self, key: str, value: str) -> None:
        """Set ``auto_persist`` (an integer string) or ``persist_file``."""
        self._ensure_open()
        if key is None or value is None:
            raise TypeError("configuration keys and values must be strings, not None")
        if key == "auto_persist":
            self.auto_persist = parse_int_prefix(value) != 0
        elif key == "persist_file":
            self.persist_file = value
        else:
            raise ValueError(f"Unknown config key: {key}")

    def save(self) -> None:
        """Write every entry to the persist file; raises ``OSError`` on failure."""
        self._ensure_open()
        write_file(self.persist_file, encode_state(self._ordered()))

    def load(self) -> bool:
        """Read entries from the persist file into the store.

        Returns False when the file is missing, unreadable or empty.
        """
        self._ensure_open()
        try:
            text = read_file(self.persist_file)
        except OSError:
            return False
        if not text:
            return False
        for key, value in decode_state(text):
            self.set(key, value)
        return True

    def close(self) -> None:
        """Drop every entry and stop accepting operations."""
        if self._closed:
            return
        self._entries.clear()
        self._closed = True

    def __len__(self) -> int:
        return len(self._entries)

    def __enter__(self) -> "StateManager":
        self._ensure_open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._closed and self.auto_persist:
            self.save()
        self.close()
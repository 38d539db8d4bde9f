"""String-keyed hash map with separate chaining and FNV-1a hashing."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Iterator, Optional

__all__ = ["fnv1a_hash", "MelpMap"]

_INITIAL_CAPACITY = 16
_LOAD_FACTOR = 0.75
_FNV_OFFSET_BASIS = 14695981039346656037
_FNV_PRIME = 1099511628211
_MASK_64 = (1 << 64) - 1


def fnv1a_hash(key: Optional[str]) -> int:
    """64-bit FNV-1a hash of the UTF-8 bytes of ``key``; 0 for ``None``."""
    if key is None:
        return 0
    value = _FNV_OFFSET_BASIS
    for byte in key.encode("utf-8"):
        value ^= byte
        value = (value * _FNV_PRIME) & _MASK_64
    return value


@dataclass
class _Entry:
    key: str
    value: Any


class MelpMap(MutableMapping):
    """Hash table with string keys, 16 initial buckets and a 0.75 load factor.

    The bucket count doubles before an insert when the table is more than
    three quarters full. New entries go to the head of their bucket chain.
    """

    def __init__(self) -> None:
        self._buckets: list[list[_Entry]] = [[] for _ in range(_INITIAL_CAPACITY)]
        self._length = 0

    @staticmethod
    def _check_key(key: Any) -> str:
        if not isinstance(key, str):
            raise TypeError(f"map keys must be strings, got {type(key).__name__}")
        return key

    def _bucket_for(self, key: str) -> list[_Entry]:
        return self._buckets[fnv1a_hash(key) % len(self._buckets)]

    def _find(self, key: str) -> Optional[_Entry]:
        return next((entry for entry in self._bucket_for(key) if entry.key == key), None)

    def __getitem__(self, key: str) -> Any:
        entry = self._find(self._check_key(key))
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: str, value: Any) -> None:
        self._check_key(key)
        if value is None:
            raise ValueError("map values must not be None")
        if self._length / len(self._buckets) > _LOAD_FACTOR:
            self.resize(len(self._buckets) * 2)
        bucket = self._bucket_for(key)
        for entry in bucket:
            if entry.key == key:
                entry.value = value
                return
        bucket.insert(0, _Entry(key, value))
        self._length += 1

    def __delitem__(self, key: str) -> None:
        bucket = self._bucket_for(self._check_key(key))
        for position, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[position]
                self._length -= 1
                return
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __iter__(self) -> Iterator[str]:
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        items = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"MelpMap({{{items}}})"

    def capacity(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    def resize(self, new_capacity: int) -> None:
        """Rehash every entry into ``new_capacity`` buckets."""
        if new_capacity <= 0:
            raise ValueError(f"capacity must be positive, got {new_capacity}")
        new_buckets: list[list[_Entry]] = [[] for _ in range(new_capacity)]
        for bucket in self._buckets:
            for entry in bucket:
                new_buckets[fnv1a_hash(entry.key) % new_capacity].insert(0, entry)
        self._buckets = new_buckets
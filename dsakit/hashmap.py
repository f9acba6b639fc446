"""A separate-chaining hash map with integer keys and values."""

from __future__ import annotations

_SIZE = 19997
_MULT = 12582917


class MyHashMap:
    """Maps integer keys to integer values; missing keys read as -1."""

    def __init__(self) -> None:
        self._buckets: list[list[tuple[int, int]]] = [[] for _ in range(_SIZE)]

    def _bucket(self, key: int) -> list[tuple[int, int]]:
        return self._buckets[key * _MULT % _SIZE]

    def put(self, key: int, val: int) -> None:
        """Insert or replace the value stored under ``key``."""
        self.remove(key)
        self._bucket(key).insert(0, (key, val))

    def get(self, key: int) -> int:
        """Return the value for ``key``, or -1 when it is absent."""
        return next((v for k, v in self._bucket(key) if k == key), -1)

    def remove(self, key: int) -> None:
        """Remove ``key`` if present."""
        bucket = self._bucket(key)
        bucket[:] = [(k, v) for k, v in bucket if k != key]
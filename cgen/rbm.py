"""Ordered map with keys compared by a three-way comparison."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Iterator, Optional

from sortedcontainers import SortedKeyList

Compare = Callable[[Any, Any], int]


def _default_cmp(x: Any, y: Any) -> int:
    return (x > y) - (x < y)


class _Entry:
    __slots__ = ("key", "value")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value


class TreeMap:
    """Map whose keys are kept in the order given by ``cmp``.

    Inserting an existing key leaves the stored value unchanged.
    """

    def __init__(
        self,
        cmp: Compare = _default_cmp,
        free_key: Optional[Callable[[Any], Any]] = None,
        free_value: Optional[Callable[[Any], Any]] = None,
    ) -> None:
        self.cmp = cmp
        self.free_key = free_key
        self.free_value = free_value
        self._wrap = cmp_to_key(cmp)
        wrap = self._wrap
        self._entries = SortedKeyList(key=lambda entry: wrap(entry.key))

    def _find(self, key: Any) -> Optional[int]:
        i = self._entries.bisect_key_left(self._wrap(key))
        if i < len(self._entries) and self.cmp(self._entries[i].key, key) == 0:
            return i
        return None

    def insert(self, key: Any, value: Any) -> tuple[Any, bool]:
        """Add ``key`` with ``value`` unless the key is present.

        Returns ``(stored value, inserted)``.
        """
        i = self._find(key)
        if i is not None:
            return self._entries[i].value, False
        self._entries.add(_Entry(key, value))
        return value, True

    def search(self, key: Any) -> Optional[tuple[Any, Any]]:
        """Return the stored ``(key, value)`` pair for ``key``, or None."""
        i = self._find(key)
        if i is None:
            return None
        entry = self._entries[i]
        return entry.key, entry.value

    def get(self, key: Any, default: Any = None) -> Any:
        i = self._find(key)
        return default if i is None else self._entries[i].value

    def remove(self, key: Any) -> bool:
        """Remove ``key``; returns whether it was present."""
        i = self._find(key)
        if i is None:
            return False
        entry = self._entries.pop(i)
        if self.free_key is not None:
            self.free_key(entry.key)
        if self.free_value is not None:
            self.free_value(entry.value)
        return True

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        return (entry.key for entry in self._entries)

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in key order."""
        return ((entry.key, entry.value) for entry in self._entries)

    def __repr__(self) -> str:
        return f"TreeMap({list(self.items())!r})"
"""Hash map built on the open-addressing table used by the hash set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from .hset import INDEX_NOT_FOUND, Compare, HashFunc, Release, _default_cmp, _OpenTable


@dataclass(frozen=True)
class MapInsertResult:
    """Slot index of the key and whether it was newly inserted."""

    index: int
    inserted: bool


class HashMap(_OpenTable):
    """Map from keys hashed by ``hash_func`` and compared with ``cmp``.

    Inserting an existing key leaves the stored value unchanged.
    """

    def __init__(
        self,
        hash_func: HashFunc = hash,
        cmp: Compare = _default_cmp,
        key_free: Release = None,
        value_free: Release = None,
    ) -> None:
        super().__init__(hash_func, cmp, key_free, value_free)

    def insert(self, key: Any, value: Any) -> MapInsertResult:
        """Add ``key`` with ``value`` unless the key is present."""
        index, inserted = self._store(key, value)
        return MapInsertResult(index, inserted)

    def value(self, key: Any) -> Any:
        """Value stored under ``key``, or None if the key is absent."""
        index = self._find(key)
        return None if index == INDEX_NOT_FOUND else self._values[index]

    def remove(self, key: Any) -> bool:
        """Remove ``key``; returns whether it was present."""
        return self._discard(key)

    def clear(self) -> None:
        """Remove every entry, releasing keys and values."""
        self._clear()

    def keys(self) -> Iterator[Any]:
        return (self._keys[i] for i in list(self._live_slots()))

    def values(self) -> Iterator[Any]:
        return (self._values[i] for i in list(self._live_slots()))

    def items(self) -> Iterator[tuple[Any, Any]]:
        return ((self._keys[i], self._values[i]) for i in list(self._live_slots()))

    def __contains__(self, key: Any) -> bool:
        return self._find(key) != INDEX_NOT_FOUND

    def __len__(self) -> int:
        return self._nnodes

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def __repr__(self) -> str:
        return f"HashMap({dict(self.items())!r})"
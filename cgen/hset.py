"""Hash set built on an open-addressing table with triangular probing."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from math import isqrt
from typing import Any, Callable, Iterator, Optional

Compare = Callable[[Any, Any], int]
HashFunc = Callable[[Any], int]
Release = Optional[Callable[[Any], Any]]

INDEX_NOT_FOUND = -1

_UNUSED = 0
_DELETED = 1
_MIN_REAL = 2
_MIN_SHIFT = 3
_MASK32 = 0xFFFFFFFF


def _default_cmp(x: Any, y: Any) -> int:
    return (x > y) - (x < y)


@lru_cache(maxsize=None)
def _prime_below(n: int) -> int:
    for candidate in range(n - 1, 1, -1):
        if all(candidate % d for d in range(2, isqrt(candidate) + 1)):
            return candidate
    return 1


class _OpenTable:
    """Slot storage shared by the hash set and the hash map.

    Each slot holds a 32-bit hash: 0 marks a never-used slot, 1 a deleted
    one, and any other value a live entry.
    """

    def __init__(
        self,
        hash_func: HashFunc,
        cmp: Compare,
        key_free: Release,
        value_free: Release,
    ) -> None:
        self._hash_func = hash_func
        self._cmp = cmp
        self._key_free = key_free
        self._value_free = value_free
        self._setup()

    def _setup(self) -> None:
        self._set_shift(_MIN_SHIFT)
        self._hashes = [_UNUSED] * self._size
        self._keys: list[Any] = [None] * self._size
        self._values: list[Any] = [None] * self._size
        self._nnodes = 0
        self._noccupied = 0

    def _set_shift(self, shift: int) -> None:
        self._size = 1 << shift
        self._mod = _prime_below(self._size)
        self._mask = self._size - 1

    def _hash_of(self, key: Any) -> int:
        h = self._hash_func(key) & _MASK32
        return h if h >= _MIN_REAL else _MIN_REAL

    def _home(self, h: int) -> int:
        return ((h * 11) & _MASK32) % self._mod

    def _lookup(self, key: Any) -> tuple[int, int]:
        h = self._hash_of(key)
        index = self._home(h)
        node_hash = self._hashes[index]
        first_deleted: Optional[int] = None
        step = 0
        while node_hash != _UNUSED:
            if node_hash == h:
                if self._cmp(self._keys[index], key) == 0:
                    return index, h
            elif node_hash == _DELETED and first_deleted is None:
                first_deleted = index
            step += 1
            index = (index + step) & self._mask
            node_hash = self._hashes[index]
        return (index if first_deleted is None else first_deleted), h

    def _is_live(self, index: int) -> bool:
        return 0 <= index < self._size and self._hashes[index] >= _MIN_REAL

    def _find(self, key: Any) -> int:
        index, _ = self._lookup(key)
        return index if self._hashes[index] >= _MIN_REAL else INDEX_NOT_FOUND

    def _store(self, key: Any, value: Any) -> tuple[int, bool]:
        index, h = self._lookup(key)
        current = self._hashes[index]
        if current >= _MIN_REAL:
            return index, False
        self._hashes[index] = h
        self._keys[index] = key
        self._values[index] = value
        self._nnodes += 1
        if current == _UNUSED:
            self._noccupied += 1
            if self._maybe_resize():
                index, _ = self._lookup(key)
        return index, True

    def _release(self, key: Any, value: Any) -> None:
        if self._key_free is not None:
            self._key_free(key)
        if self._value_free is not None:
            self._value_free(value)

    def _discard(self, key: Any) -> bool:
        index, _ = self._lookup(key)
        if self._hashes[index] < _MIN_REAL:
            return False
        old_key, old_value = self._keys[index], self._values[index]
        self._hashes[index] = _DELETED
        self._keys[index] = None
        self._values[index] = None
        self._nnodes -= 1
        self._release(old_key, old_value)
        self._maybe_resize()
        return True

    def _live_slots(self) -> Iterator[int]:
        return (i for i, h in enumerate(self._hashes) if h >= _MIN_REAL)

    def _maybe_resize(self) -> bool:
        size, occupied = self._size, self._noccupied
        if (size > self._nnodes * 4 and size > 1 << _MIN_SHIFT) or (
            size <= occupied + occupied // 16
        ):
            self._resize()
            return True
        return False

    def _resize(self) -> None:
        entries = [
            (self._hashes[i], self._keys[i], self._values[i]) for i in self._live_slots()
        ]
        self._set_shift(max(int(self._nnodes * 1.333).bit_length(), _MIN_SHIFT))
        hashes = [_UNUSED] * self._size
        keys: list[Any] = [None] * self._size
        values: list[Any] = [None] * self._size
        for h, key, value in entries:
            index = self._home(h)
            step = 0
            while hashes[index] != _UNUSED:
                step += 1
                index = (index + step) & self._mask
            hashes[index], keys[index], values[index] = h, key, value
        self._hashes, self._keys, self._values = hashes, keys, values
        self._noccupied = self._nnodes

    def _clear(self) -> None:
        for i in list(self._live_slots()):
            self._release(self._keys[i], self._values[i])
        self._setup()


@dataclass(frozen=True)
class InsertResult:
    """Slot index of the key and whether it was newly inserted."""

    index: int
    inserted: bool


class HashSet(_OpenTable):
    """Set of keys hashed by ``hash_func`` and compared with ``cmp``."""

    def __init__(
        self,
        hash_func: HashFunc = hash,
        cmp: Compare = _default_cmp,
        key_free: Release = None,
    ) -> None:
        super().__init__(hash_func, cmp, key_free, None)

    def insert(self, key: Any) -> InsertResult:
        """Add ``key`` unless an equal key is present."""
        index, inserted = self._store(key, None)
        return InsertResult(index, inserted)

    def index_of(self, key: Any) -> int:
        """Slot index of ``key``, or ``INDEX_NOT_FOUND``."""
        return self._find(key)

    def key_at(self, index: int) -> Any:
        """Key stored in slot ``index``; IndexError if the slot holds none."""
        if not self._is_live(index):
            raise IndexError(f"no key in slot {index}")
        return self._keys[index]

    def remove(self, key: Any) -> bool:
        """Remove ``key``; returns whether it was present."""
        return self._discard(key)

    def clear(self) -> None:
        """Remove every key, releasing each with ``key_free``."""
        self._clear()

    def __contains__(self, key: Any) -> bool:
        return self._find(key) != INDEX_NOT_FOUND

    def __len__(self) -> int:
        return self._nnodes

    def __iter__(self) -> Iterator[Any]:
        return (self._keys[i] for i in list(self._live_slots()))

    def __repr__(self) -> str:
        return f"HashSet({list(self)!r})"
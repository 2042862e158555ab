"""Ordered set of unique values under a three-way comparison."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Iterator, Optional

from sortedcontainers import SortedKeyList

Compare = Callable[[Any, Any], int]


def _default_cmp(x: Any, y: Any) -> int:
    return (x > y) - (x < y)


class SortedSet:
    """Set of values kept in the order given by ``cmp``."""

    def __init__(
        self,
        cmp: Compare = _default_cmp,
        free_value: Optional[Callable[[Any], Any]] = None,
    ) -> None:
        self.cmp = cmp
        self.free_value = free_value
        self._items = SortedKeyList(key=cmp_to_key(cmp))

    def _find(self, elem: Any) -> Optional[int]:
        i = self._items.bisect_left(elem)
        if i < len(self._items) and self.cmp(self._items[i], elem) == 0:
            return i
        return None

    def insert(self, elem: Any) -> tuple[Any, bool]:
        """Add ``elem`` unless an equal value is present.

        Returns ``(stored value, inserted)``; the stored value is the existing
        one when nothing was inserted.
        """
        i = self._find(elem)
        if i is not None:
            return self._items[i], False
        self._items.add(elem)
        return elem, True

    def search(self, elem: Any) -> Any:
        """Return the stored value equal to ``elem``, or None."""
        i = self._find(elem)
        return None if i is None else self._items[i]

    def remove(self, elem: Any) -> bool:
        """Remove the value equal to ``elem``; returns whether one was found."""
        i = self._find(elem)
        if i is None:
            return False
        value = self._items.pop(i)
        if self.free_value is not None:
            self.free_value(value)
        return True

    def __contains__(self, elem: Any) -> bool:
        return self._find(elem) is not None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SortedSet({list(self._items)!r})"
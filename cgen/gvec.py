"""Growable vector of arbitrary values with an explicit capacity."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Iterator, Optional


class Vector:
    """A list-backed vector that tracks a reserved capacity."""

    def __init__(
        self, capacity: int = 0, free_value: Optional[Callable[[Any], Any]] = None
    ) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: list[Any] = []
        self._capacity = capacity
        self.free_value = free_value

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, value: Any) -> None:
        if len(self._items) >= self._capacity:
            self._capacity = max(1, 2 * self._capacity)
        self._items.append(value)

    def remove(self, index: int) -> bool:
        """Remove the item at ``index``, shifting later items down.

        Returns False, changing nothing, when ``index`` is out of range.
        """
        if not 0 <= index < len(self._items):
            return False
        value = self._items.pop(index)
        if self.free_value is not None:
            self.free_value(value)
        return True

    def set_capacity(self, capacity: int) -> None:
        """Reserve ``capacity``; ignored when smaller than the current size."""
        if capacity < len(self._items):
            return
        self._capacity = capacity

    def sort(self, cmp: Callable[[Any, Any], int]) -> None:
        """Sort in place with a three-way comparison."""
        self._items.sort(key=cmp_to_key(cmp))

    def clear(self) -> None:
        """Remove every item, releasing each with ``free_value``."""
        if self.free_value is not None:
            for value in self._items:
                self.free_value(value)
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"
"""One-way priority queue built on a binary heap."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterator

from .heap import max_shift_down, max_shift_up, min_shift_down, min_shift_up

Compare = Callable[[Any, Any], int]


def _default_cmp(x: Any, y: Any) -> int:
    return (x > y) - (x < y)


class Priority(Enum):
    """Which end of the ordering is served first."""

    MIN = "min"
    MAX = "max"


class PriorityQueue:
    """Priority queue ordered by a three-way comparison ``cmp``."""

    def __init__(self, kind: Priority = Priority.MAX, cmp: Compare = _default_cmp) -> None:
        self.kind = Priority(kind)
        self.cmp = cmp
        self._data: list[Any] = []
        if self.kind is Priority.MIN:
            self._shift_up, self._shift_down = min_shift_up, min_shift_down
        else:
            self._shift_up, self._shift_down = max_shift_up, max_shift_down

    def enqueue(self, value: Any) -> None:
        self._data.append(value)
        self._shift_up(self._data, len(self._data) - 1, self.cmp)

    def dequeue(self) -> Any:
        """Remove and return the item with the highest priority."""
        if not self._data:
            raise IndexError("dequeue from empty priority queue")
        top = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._shift_down(self._data, 0, len(self._data), self.cmp)
        return top

    def peek(self) -> Any:
        """Return the item with the highest priority without removing it."""
        if not self._data:
            raise IndexError("peek into empty priority queue")
        return self._data[0]

    def replace_root(self, value: Any) -> None:
        """Overwrite the top item with ``value``.

        The heap is restored by sifting down only when the old top compares
        greater than ``value``; otherwise ``value`` stays at the top.
        """
        if not self._data:
            raise IndexError("replace root of empty priority queue")
        order = self.cmp(self._data[0], value)
        self._data[0] = value
        if order <= 0:
            return
        self._shift_down(self._data, 0, len(self._data), self.cmp)

    def is_empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        """Yield the items in heap-array order."""
        return iter(list(self._data))

    def __repr__(self) -> str:
        return f"PriorityQueue({self.kind.name}, {self._data!r})"
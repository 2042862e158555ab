"""Singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False, repr=False)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class SinglyLinkedList:
    """Singly linked list with an optional callback run on removed values."""

    def __init__(self, free_value: Optional[Callable[[Any], Any]] = None) -> None:
        self.free_value = free_value
        self._front: Optional[_Node] = None
        self._back: Optional[_Node] = None
        self._size = 0

    def push_front(self, value: Any) -> None:
        node = _Node(value, self._front)
        if self._front is None:
            self._back = node
        self._front = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        node = _Node(value)
        if self._back is None:
            self._front = node
        else:
            self._back.next = node
        self._back = node
        self._size += 1

    def pop_front(self) -> Any:
        """Remove the front item and return it; ``None`` if the list is empty."""
        node = self._front
        if node is None:
            return None
        self._front = node.next
        if self._front is None:
            self._back = None
        self._size -= 1
        if self.free_value is not None:
            self.free_value(node.value)
        return node.value

    def front(self) -> Any:
        """Return the first value; raises IndexError on an empty list."""
        if self._front is None:
            raise IndexError("front of empty list")
        return self._front.value

    def back(self) -> Any:
        """Return the last value; raises IndexError on an empty list."""
        if self._back is None:
            raise IndexError("back of empty list")
        return self._back.value

    def clear(self) -> None:
        while not self.is_empty():
            self.pop_front()

    def is_empty(self) -> bool:
        return self._front is None and self._back is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        cur = self._front
        while cur is not None:
            yield cur.value
            cur = cur.next

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"
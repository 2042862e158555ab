"""Doubly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False, repr=False)
class Node:
    """A list node; ``next`` and ``prev`` link neighbours or are ``None``."""

    value: Any
    next: Optional["Node"] = None
    prev: Optional["Node"] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class DoublyLinkedList:
    """Doubly linked list with an optional callback run on removed values."""

    def __init__(self, free_value: Optional[Callable[[Any], Any]] = None) -> None:
        self.front: Optional[Node] = None
        self.back: Optional[Node] = None
        self.free_value = free_value
        self._size = 0

    def _release(self, value: Any) -> None:
        if self.free_value is not None:
            self.free_value(value)

    def push_front(self, value: Any) -> Node:
        """Add ``value`` at the front; returns the new node."""
        node = Node(value)
        if self.front is None:
            self.front = self.back = node
        else:
            self.front.prev = node
            node.next = self.front
            self.front = node
        self._size += 1
        return node

    def push_back(self, value: Any) -> Node:
        """Add ``value`` at the back; returns the new node."""
        node = Node(value)
        if self.back is None:
            self.front = self.back = node
        else:
            self.back.next = node
            node.prev = self.back
            self.back = node
        self._size += 1
        return node

    def pop_front(self) -> Any:
        """Remove the front node and return its value; ``None`` if empty."""
        if self.is_empty():
            return None
        node = self.front
        self.front = node.next
        if self.front is not None:
            self.front.prev = None
        else:
            self.back = None
        self._size -= 1
        self._release(node.value)
        return node.value

    def pop_back(self) -> Any:
        """Remove the back node and return its value; ``None`` if empty."""
        if self.is_empty():
            return None
        node = self.back
        self.back = node.prev
        if self.back is not None:
            self.back.next = None
        else:
            self.front = None
        self._size -= 1
        self._release(node.value)
        return node.value

    def insert_after(self, node: Optional[Node], value: Any) -> Node:
        """Insert ``value`` after ``node``, or at the back if ``node`` is None."""
        if node is None:
            return self.push_back(value)
        new = Node(value, next=node.next, prev=node)
        following = node.next
        node.next = new
        if following is not None:
            following.prev = new
        else:
            self.back = new
        self._size += 1
        return new

    def insert_before(self, node: Optional[Node], value: Any) -> Node:
        """Insert ``value`` before ``node``, or at the front if ``node`` is None."""
        if node is None:
            return self.push_front(value)
        new = Node(value, next=node, prev=node.prev)
        preceding = node.prev
        node.prev = new
        if preceding is not None:
            preceding.next = new
        else:
            self.front = new
        self._size += 1
        return new

    def clear(self) -> None:
        """Remove every node from the front."""
        while not self.is_empty():
            self.pop_front()

    def is_empty(self) -> bool:
        return self.front is None and self.back is None

    def nodes(self) -> Iterator[Node]:
        """Yield nodes from front to back."""
        cur = self.front
        while cur is not None:
            yield cur
            cur = cur.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self.nodes())

    def __reversed__(self) -> Iterator[Any]:
        cur = self.back
        while cur is not None:
            yield cur.value
            cur = cur.prev

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"
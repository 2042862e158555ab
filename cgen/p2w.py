"""Max-heap whose entries are addressed by an external index."""

from __future__ import annotations

from typing import Any, Callable

Compare = Callable[[Any, Any], int]

_DEACTIVATED = 1
_OFFSET = 2


def _default_cmp(x: Any, y: Any) -> int:
    return (x > y) - (x < y)


class IndexedHeap:
    """Max-heap supporting lookup and update of entries by external index.

    Each external index is absent, deactivated (popped with
    :meth:`deactivate_max`), or active in the heap.
    """

    def __init__(self, cmp: Compare = _default_cmp) -> None:
        self.cmp = cmp
        self._data: list[Any] = []
        self._index: list[int] = []
        self._slots: dict[int, int] = {}

    def _switch(self, e1: int, e2: int) -> None:
        if e1 == e2:
            return
        data, index = self._data, self._index
        data[e1], data[e2] = data[e2], data[e1]
        i1, i2 = index[e1], index[e2]
        self._slots[i1] = e2 + _OFFSET
        self._slots[i2] = e1 + _OFFSET
        index[e1], index[e2] = i2, i1

    def _shift_up(self, pos: int) -> None:
        while pos > 0:
            parent = (pos + 1) // 2 - 1
            if self.cmp(self._data[pos], self._data[parent]) < 0:
                return
            self._switch(pos, parent)
            pos = parent

    def _sink(self, head: int) -> None:
        data = self._data
        while True:
            size = len(data)
            left, right = 2 * head + 1, 2 * head + 2
            if left >= size:
                return
            if right == size or self.cmp(data[left], data[right]) >= 0:
                child = left
            else:
                child = right
            if self.cmp(data[head], data[child]) >= 0:
                return
            self._switch(head, child)
            head = child

    def _position(self, idx: int) -> int:
        pos = self._slots.get(idx, 0) - _OFFSET
        if pos < 0:
            raise KeyError(idx)
        return pos

    def _pop_top(self, mark: int) -> tuple[Any, int]:
        if not self._data:
            raise IndexError("pop from empty heap")
        value, ext = self._data[0], self._index[0]
        self._switch(0, len(self._data) - 1)
        self._data.pop()
        self._index.pop()
        if mark:
            self._slots[ext] = mark
        else:
            self._slots.pop(ext, None)
        self._sink(0)
        return value, ext

    def push(self, idx: int, elem: Any) -> None:
        """Add ``elem`` under external index ``idx``."""
        size = len(self._data)
        self._data.append(elem)
        self._index.append(idx)
        self._slots[idx] = size + _OFFSET
        self._shift_up(size)

    def max(self) -> Any:
        if not self._data:
            raise IndexError("max of empty heap")
        return self._data[0]

    def max_index(self) -> int:
        if not self._index:
            raise IndexError("max index of empty heap")
        return self._index[0]

    def get(self, idx: int) -> Any:
        """Return the active element stored under ``idx``; KeyError if none."""
        return self._data[self._position(idx)]

    def has_elem(self, idx: int) -> bool:
        """True when ``idx`` is active or deactivated."""
        return self._slots.get(idx, 0) != 0

    def has_active(self, idx: int) -> bool:
        return self._slots.get(idx, 0) > _DEACTIVATED

    def delete_max(self) -> Any:
        return self._pop_top(0)[0]

    def deactivate_max(self) -> Any:
        """Remove the maximum but remember its index as deactivated."""
        return self._pop_top(_DEACTIVATED)[0]

    def delete_max_index(self) -> tuple[Any, int]:
        """Remove the maximum; returns ``(element, external index)``."""
        return self._pop_top(0)

    def modify(self, idx: int, elem: Any) -> None:
        """Replace the element under ``idx`` and restore the heap."""
        pos = self._position(idx)
        self._data[pos] = elem
        self._sink(pos)
        self._shift_up(pos)

    def check(self) -> bool:
        """Verify the max-heap property."""
        data, size = self._data, len(self._data)
        for i in range(size):
            left, right = 2 * i + 1, 2 * i + 2
            if left >= size:
                break
            if self.cmp(data[left], data[i]) > 0:
                return False
            if right >= size:
                break
            if self.cmp(data[right], data[i]) > 0:
                return False
        return True

    def clear(self) -> None:
        self._data.clear()
        self._index.clear()
        self._slots.clear()

    def is_empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        pairs = list(zip(self._index, self._data))
        return f"IndexedHeap({pairs!r})"
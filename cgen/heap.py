"""Binary heap primitives working in place on Python lists.

Every function takes a three-way comparison ``cmp(x, y)`` that returns a
negative number, zero or a positive number, like ``strcmp``.
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence

Compare = Callable[[Any, Any], int]


def _parent(i: int) -> int:
    return (i - 1) // 2


def _shift_down(
    a: MutableSequence[Any],
    i: int,
    size: int,
    out_of_order: Callable[[Any, Any], bool],
) -> int:
    while True:
        left, right, root = 2 * i + 1, 2 * i + 2, i
        if left < size and out_of_order(a[root], a[left]):
            root = left
        if right < size and out_of_order(a[root], a[right]):
            root = right
        if root == i:
            return i
        a[i], a[root] = a[root], a[i]
        i = root


def _shift_up(
    a: MutableSequence[Any],
    i: int,
    out_of_order: Callable[[Any, Any], bool],
) -> int:
    while i > 0:
        parent = _parent(i)
        if not out_of_order(a[parent], a[i]):
            break
        a[i], a[parent] = a[parent], a[i]
        i = parent
    return i


def _make(a: MutableSequence[Any], out_of_order: Callable[[Any, Any], bool]) -> None:
    size = len(a)
    for i in range(size // 2, -1, -1):
        _shift_down(a, i, size, out_of_order)


def _min_order(cmp: Compare) -> Callable[[Any, Any], bool]:
    return lambda x, y: cmp(x, y) > 0


def _max_order(cmp: Compare) -> Callable[[Any, Any], bool]:
    return lambda x, y: cmp(x, y) < 0


def min_shift_down(a: MutableSequence[Any], i: int, size: int, cmp: Compare) -> int:
    """Sift ``a[i]`` down within the first ``size`` items of a min-heap.

    Returns the index where the item settled.
    """
    return _shift_down(a, i, size, _min_order(cmp))


def min_shift_up(a: MutableSequence[Any], i: int, cmp: Compare) -> int:
    """Sift ``a[i]`` up in a min-heap; returns the index where it settled."""
    return _shift_up(a, i, _min_order(cmp))


def make_min_heap(a: MutableSequence[Any], cmp: Compare) -> None:
    """Rearrange ``a`` in place into a min-heap."""
    _make(a, _min_order(cmp))


def max_shift_down(a: MutableSequence[Any], i: int, size: int, cmp: Compare) -> int:
    """Sift ``a[i]`` down within the first ``size`` items of a max-heap.

    Returns the index where the item settled.
    """
    return _shift_down(a, i, size, _max_order(cmp))


def max_shift_up(a: MutableSequence[Any], i: int, cmp: Compare) -> int:
    """Sift ``a[i]`` up in a max-heap; returns the index where it settled."""
    return _shift_up(a, i, _max_order(cmp))


def make_max_heap(a: MutableSequence[Any], cmp: Compare) -> None:
    """Rearrange ``a`` in place into a max-heap."""
    _make(a, _max_order(cmp))
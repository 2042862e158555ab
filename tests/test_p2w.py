import pytest
from hypothesis import given
from hypothesis import strategies as st

from cgen.p2w import IndexedHeap


def cmp_num(x, y):
    return (x > y) - (x < y)


def test_integer_heap():
    h = IndexedHeap(cmp_num)
    h.push(0, 0)
    h.push(1, 100)
    h.push(2, 200)
    h.push(3, 300)
    h.push(5, 500)
    assert h.check() is True
    assert h.max() == 500
    assert h.get(2) == 200
    assert h.get(1) == 100
    h.modify(1, 10000)
    assert h.max() == 10000
    assert h.max_index() == 1
    assert h.delete_max() == 10000
    assert h.delete_max() == 500
    assert h.delete_max() == 300
    assert h.delete_max() == 200
    assert h.delete_max() == 0
    assert h.is_empty()


def test_double_heap():
    h = IndexedHeap(cmp_num)
    h.push(0, 0.0)
    h.push(1, 100.1)
    h.push(2, 200.2)
    h.push(3, 300.3)
    h.push(5, 500.5)
    assert h.check() is True
    assert h.max() == 500.5
    assert h.get(2) == 200.2
    assert h.get(1) == 100.1
    h.modify(1, 10000.01)
    assert h.max() == 10000.01
    assert h.max_index() == 1
    assert h.delete_max() == 10000.01
    assert h.delete_max() == 500.5
    assert h.delete_max() == 300.3
    assert h.delete_max() == 200.2
    assert h.delete_max() == 0


def test_delete_max_index_and_membership():
    h = IndexedHeap(cmp_num)
    h.push(7, 70)
    h.push(4, 40)
    assert h.delete_max_index() == (70, 7)
    assert not h.has_elem(7)
    assert h.has_active(4)
    assert h.get(4) == 40


def test_deactivate_max():
    h = IndexedHeap(cmp_num)
    h.push(1, 10)
    h.push(2, 20)
    assert h.deactivate_max() == 20
    assert h.has_elem(2)
    assert not h.has_active(2)
    with pytest.raises(KeyError):
        h.get(2)
    assert len(h) == 1


def test_missing_and_empty():
    h = IndexedHeap(cmp_num)
    with pytest.raises(IndexError):
        h.max()
    with pytest.raises(IndexError):
        h.delete_max()
    with pytest.raises(KeyError):
        h.modify(3, 1)
    assert not h.has_elem(3)


def test_clear():
    h = IndexedHeap(cmp_num)
    h.push(1, 5)
    h.clear()
    assert h.is_empty()
    assert not h.has_elem(1)


@given(st.lists(st.integers(), min_size=1, max_size=50), st.data())
def test_modify_keeps_heap(values, data):
    h = IndexedHeap(cmp_num)
    for i, v in enumerate(values):
        h.push(i, v)
    target = data.draw(st.integers(0, len(values) - 1))
    new = data.draw(st.integers())
    h.modify(target, new)
    values[target] = new
    assert h.check()
    for i, v in enumerate(values):
        assert h.get(i) == v
    out = [h.delete_max() for _ in values]
    assert out == sorted(values, reverse=True)
import pytest

from cgen.gsl import SinglyLinkedList


def test_push_and_pop_sequence():
    lst = SinglyLinkedList(None)
    lst.push_back(1)
    assert len(lst) == 1
    lst.push_front(2)
    assert len(lst) == 2
    lst.push_back(3)
    assert len(lst) == 3

    assert lst.front() == 2
    assert list(lst) == [2, 1, 3]
    assert lst.back() == 3
    assert lst.pop_front() == 2
    assert lst.pop_front() == 1
    assert lst.pop_front() == 3
    assert lst.is_empty()


def test_empty_list():
    lst = SinglyLinkedList(None)
    assert len(lst) == 0
    assert lst.is_empty()
    assert lst.pop_front() is None
    with pytest.raises(IndexError):
        lst.front()
    with pytest.raises(IndexError):
        lst.back()


def test_free_value_and_clear():
    freed = []
    lst = SinglyLinkedList(freed.append)
    for line in ["x\n", "y\n", "z\n"]:
        lst.push_back(line)
    lst.clear()
    assert freed == ["x\n", "y\n", "z\n"]
    assert lst.is_empty()
    assert len(lst) == 0


def test_reuse_after_emptying():
    lst = SinglyLinkedList(None)
    lst.push_back(1)
    lst.pop_front()
    lst.push_back(7)
    lst.push_back(8)
    assert list(lst) == [7, 8]
    assert lst.front() == 7
    assert lst.back() == 8
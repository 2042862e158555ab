import random
import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cgen.hset import INDEX_NOT_FOUND, HashSet, InsertResult


def test_string_keys_insert_and_remove():
    freed = []
    hs = HashSet(key_free=freed.append)
    assert hs.insert("ABC").inserted is True
    assert hs.insert("DEF").inserted is True
    assert hs.insert("ABC").inserted is False
    assert hs.insert("DHF").inserted is True
    assert hs.index_of("ABC") != INDEX_NOT_FOUND
    assert hs.remove("ABC") is True
    assert hs.index_of("ABC") == INDEX_NOT_FOUND
    assert freed == ["ABC"]


def test_integer_keys_contains_then_removed():
    hs = HashSet()
    values = list(range(11))
    for v in values:
        assert hs.insert(v).inserted is True
    for v in values:
        assert v in hs
        hs.remove(v)
        assert v not in hs
    assert len(hs) == 0


def test_random_strings():
    n = 100000
    rng = random.Random(1234)
    hs = HashSet()
    keys = []
    for _ in range(n):
        while True:
            key = "".join(rng.choice(string.ascii_lowercase) for _ in range(9))
            if key not in hs:
                break
        keys.append(key)
        res = hs.insert(key)
        assert res.inserted is True
        assert hs.key_at(res.index) == key
    assert all(k in hs for k in keys)
    assert len(hs) == n


def test_insert_result_index_points_at_key():
    hs = HashSet()
    res = hs.insert("x")
    assert res == InsertResult(hs.index_of("x"), True)
    assert hs.key_at(res.index) == "x"


def test_key_at_removed_slot_raises():
    hs = HashSet()
    res = hs.insert("gone")
    hs.insert("stays")
    hs.remove("gone")
    with pytest.raises(IndexError):
        hs.key_at(res.index)
    with pytest.raises(IndexError):
        hs.key_at(-1)


def test_duplicate_insert_returns_existing_index():
    hs = HashSet()
    first = hs.insert(42)
    second = hs.insert(42)
    assert second.inserted is False
    assert second.index == first.index
    assert len(hs) == 1


def test_remove_missing_returns_false():
    freed = []
    hs = HashSet(key_free=freed.append)
    hs.insert(1)
    assert hs.remove(2) is False
    assert freed == []
    assert len(hs) == 1


@pytest.mark.parametrize("constant", [0, 1, 7])
def test_colliding_hashes(constant):
    hs = HashSet(hash_func=lambda k: constant)
    for v in range(50):
        assert hs.insert(v).inserted is True
    for v in range(0, 50, 2):
        assert hs.remove(v) is True
    assert sorted(hs) == list(range(1, 50, 2))
    assert all(v not in hs for v in range(0, 50, 2))


def test_clear_releases_all_keys():
    freed = []
    hs = HashSet(key_free=freed.append)
    for v in range(20):
        hs.insert(v)
    hs.clear()
    assert sorted(freed) == list(range(20))
    assert len(hs) == 0
    assert list(hs) == []
    assert hs.insert(3).inserted is True


def test_grow_and_shrink_keeps_contents():
    hs = HashSet()
    for v in range(1000):
        hs.insert(v)
    for v in range(990):
        assert hs.remove(v) is True
    assert sorted(hs) == list(range(990, 1000))
    for v in range(990, 1000):
        assert hs.key_at(hs.index_of(v)) == v


def test_custom_cmp_case_insensitive():
    def cmp(a, b):
        a, b = a.lower(), b.lower()
        return (a > b) - (a < b)

    hs = HashSet(hash_func=lambda s: hash(s.lower()), cmp=cmp)
    hs.insert("Hello")
    assert "HELLO" in hs
    assert hs.insert("hello").inserted is False


@given(st.lists(st.tuples(st.booleans(), st.integers(-50, 50)), max_size=200))
def test_matches_builtin_set(ops):
    hs = HashSet()
    model = set()
    for add, v in ops:
        if add:
            assert hs.insert(v).inserted == (v not in model)
            model.add(v)
        else:
            assert hs.remove(v) == (v in model)
            model.discard(v)
    assert len(hs) == len(model)
    assert set(hs) == model
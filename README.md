# cgen

Generic in-memory containers. Their ordering and equality come from
comparison functions that you supply. A comparison takes two values and
returns a negative number, zero or a positive number, like a classic
three-way `cmp`. Where a container takes a comparison and you pass none, it
uses the natural `<`/`>` ordering.

Several containers accept release callbacks (`free_value`, `free_key`,
`key_free`, `value_free`). A container calls these on each value it drops
when you remove, pop or clear.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## What is inside

| Module        | Contents |
|---------------|----------|
| `cgen.heap`   | `make_min_heap`, `make_max_heap`, and the sift helpers `min_shift_up`, `min_shift_down`, `max_shift_up`, `max_shift_down`. They work in place on a list, and each sift helper returns the index where the item settled. |
| `cgen.gdl`    | `DoublyLinkedList`, with `Node` handles, `insert_after` / `insert_before`, `nodes()` and reverse iteration. |
| `cgen.gsl`    | `SinglyLinkedList`, with `push_front`, `push_back`, `pop_front`, `front` and `back`. It can serve as a stack or as a queue. |
| `cgen.gvec`   | `Vector`, a growable array that tracks its `capacity`. It has `remove(index)`, `set_capacity` and `sort(cmp)`. |
| `cgen.text`   | `tokens(line, delims)` and `split(line)`. Both split on delimiter characters and drop empty tokens. `split` uses ASCII whitespace. |
| `cgen.p1w`    | `PriorityQueue`, either `Priority.MIN` or `Priority.MAX`. It has `enqueue`, `dequeue`, `peek` and `replace_root`. |
| `cgen.p2w`    | `IndexedHeap`, a max-heap whose entries you reach through external indices. It has `get`, `modify`, `delete_max`, `deactivate_max`, `delete_max_index`, `has_elem`, `has_active` and `check`. |
| `cgen.rbs`    | `SortedSet`, a set of unique values kept in comparison order. |
| `cgen.rbm`    | `TreeMap`, an ordered key/value map. |
| `cgen.hset`   | `HashSet`, an open-addressing table with a user hash function. `insert` returns an `InsertResult`, and you can look up slots with `index_of` and `key_at`. |
| `cgen.hmap`   | `HashMap`, which uses the same table design. `insert` returns a `MapInsertResult`. |

Inserting a key that is already present into `TreeMap` or `HashMap` leaves
the stored value unchanged.

Operations on an empty container that have no value to return raise
`IndexError`. This applies to `PriorityQueue.dequeue`/`peek`,
`IndexedHeap.max`/`delete_max`, and `SinglyLinkedList.front`/`back`. The
linked lists' `pop_front`/`pop_back` return `None` instead.

## Examples

A priority queue:

```python
from cgen.p1w import Priority, PriorityQueue

def cmp(a, b):
    return (a > b) - (a < b)

q = PriorityQueue(Priority.MAX, cmp)
for v in (10, 30, 20, 50, 60):
    q.enqueue(v)
print(q.dequeue(), q.dequeue())   # 60 50
print(q.peek())                   # 30
```

A doubly linked list with positional insertion:

```python
from cgen.gdl import DoublyLinkedList

songs = DoublyLinkedList(None)
songs.push_back("Seasons in the sun")
songs.push_back("Black or White")
songs.push_front("Beautiful in white")
first, *_ = songs.nodes()
songs.insert_after(first, "Lemon tree")
print(list(songs))
```

An indexed heap, where you can modify each value through its index:

```python
from cgen.p2w import IndexedHeap

h = IndexedHeap(cmp)
for idx, v in [(0, 0), (1, 100), (2, 200), (3, 300), (5, 500)]:
    h.push(idx, v)
h.modify(1, 10000)
print(h.max(), h.max_index())     # 10000 1
```

Hash and ordered maps:

```python
from cgen.hmap import HashMap
from cgen.rbm import TreeMap

m = HashMap(hash, cmp, None, None)
m.insert("aaa", 100)
print(m.value("aaa"))             # 100

t = TreeMap(cmp, None, None)
t.insert("Nguyen Van A", 1)
t.insert("Tran Van D", 5)
print(list(t.items()))
```

Splitting text on ASCII whitespace:

```python
from cgen.text import split

print(split("Hello\tworld\nC"))    # ['Hello', 'world', 'C']
```

## What it does not do

This package is a library only. It has no command-line tool and does not
save containers to disk. The containers are not synchronised for use from
several threads at once.
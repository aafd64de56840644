# setkit

Two set containers for integers. Each one has a cursor-style iterator.

- `setkit.hashset.HashSet` is a hash table with coalesced chaining. An
  element that collides goes into the lowest free slot and is linked into the
  chain of its home slot. The table starts with two slots and doubles when no
  free slot remains.
- `setkit.sortedset.SortedSet` is an unbalanced binary search tree. It is
  ordered by a relation that you supply, such as `lambda a, b: a <= b`.

## Installation

From a checkout of the project:

```
pip install .
```

## HashSet

```python
from setkit.hashset import HashSet

s = HashSet()
s.add(5)        # True
s.add(5)        # False, already present
s.search(5)     # True
s.remove(5)     # True
s.remove(5)     # False

other = HashSet()
for value in (4, 6, 8):
    other.add(value)
s.union(other)  # adds every element of other to s
len(s), 6 in s, sorted(s)   # (3, True, [4, 6, 8])
```

The set also has `size()` and `is_empty()`, and it supports `len()`, `in` and
plain iteration. Iteration follows the order of the table slots, so the order
is not sorted. With `in`, a value that is not an `int` gives `False`.

## SortedSet

The relation decides the order. `relation(a, b)` should return `True` when
`a` comes before `b` or is equal to it. Iteration yields the elements in
in-order sequence under that relation.

```python
from setkit.sortedset import SortedSet

ascending = SortedSet(lambda a, b: a <= b)
for value in (5, 1, 10, 7, -3):
    ascending.add(value)
list(ascending)              # [-3, 1, 5, 7, 10]
ascending.remove(1)          # True
ascending.search(1)          # False

descending = SortedSet(lambda a, b: a >= b)
for value in range(6):
    descending.add(value)
list(descending)             # [5, 4, 3, 2, 1, 0]

small = SortedSet(lambda a, b: a <= b)
for value in range(3):
    small.add(value)
small.is_subset_of(ascending)  # False: 0 and 2 are missing
```

`size()`, `is_empty()`, `len()` and `in` work as they do for `HashSet`.

## Cursor iterators

`HashSet.iterator()` returns a `HashSetIterator`. `SortedSet.iterator()`
returns a `SortedSetIterator`. Both work the same way:

```python
it = s.iterator()
while it.valid():
    print(it.get_current())
    it.next()
it.first()  # rewind to the first element
```

If you call `next()` or `get_current()` on a cursor that is no longer valid,
it raises `IndexError`. Do not change a set while you iterate over it.

## Scope

Both containers hold integers in memory only. They have no persistence, no
thread safety and no balancing of the tree. The package has no command-line
tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```
"""A set of integers stored in a hash table with coalesced chaining."""

from __future__ import annotations

from collections.abc import Iterator

_NO_SLOT = -1
_INITIAL_CAPACITY = 2


class HashSet:
    """Set of integers kept in a coalesced-chaining hash table.

    Colliding elements are stored in the lowest free slot and linked into
    the chain of their home slot. The table doubles when it is full.
    """

    def __init__(self) -> None:
        self._reset(_INITIAL_CAPACITY)

    def _reset(self, capacity: int) -> None:
        self._capacity = capacity
        self._keys: list[int | None] = [None] * capacity
        self._next: list[int] = [_NO_SLOT] * capacity
        self._first_empty = 0
        self._count = 0

    def _home(self, elem: int) -> int:
        return elem % self._capacity

    def _find(self, elem: int) -> tuple[int, int]:
        """Return (previous slot, slot) of elem along its chain; slot is -1 if absent."""
        prev = _NO_SLOT
        current = self._home(elem)
        while current != _NO_SLOT and self._keys[current] != elem:
            prev = current
            current = self._next[current]
        return prev, current

    def _advance_first_empty(self) -> None:
        while self._first_empty < self._capacity and self._keys[self._first_empty] is not None:
            self._first_empty += 1

    def _place(self, elem: int) -> None:
        pos = self._home(elem)
        if self._keys[pos] is None:
            self._keys[pos] = elem
            self._next[pos] = _NO_SLOT
        else:
            tail = pos
            while self._next[tail] != _NO_SLOT:
                tail = self._next[tail]
            slot = self._first_empty
            self._keys[slot] = elem
            self._next[tail] = slot
            self._next[slot] = _NO_SLOT
        self._count += 1
        self._advance_first_empty()

    def _grow(self) -> None:
        old = [key for key in self._keys if key is not None]
        self._reset(self._capacity * 2)
        for elem in old:
            self._place(elem)

    def _clear_slot(self, slot: int) -> None:
        self._keys[slot] = None
        self._next[slot] = _NO_SLOT
        self._count -= 1
        if slot < self._first_empty:
            self._first_empty = slot

    def add(self, elem: int) -> bool:
        """Add elem; return False if it was already present."""
        if self.search(elem):
            return False
        if self._first_empty >= self._capacity:
            self._grow()
        self._place(elem)
        return True

    def remove(self, elem: int) -> bool:
        """Remove elem; return False if it was not present."""
        prev, current = self._find(elem)
        if current == _NO_SLOT:
            return False

        displaced: list[int] = []
        slot = self._next[current]
        while slot != _NO_SLOT:
            following = self._next[slot]
            displaced.append(self._keys[slot])
            self._clear_slot(slot)
            slot = following

        self._clear_slot(current)
        if prev != _NO_SLOT:
            self._next[prev] = _NO_SLOT

        for moved in displaced:
            self._place(moved)
        return True

    def search(self, elem: int) -> bool:
        """Return True if elem is in the set."""
        return self._find(elem)[1] != _NO_SLOT

    def size(self) -> int:
        """Return the number of elements."""
        return self._count

    def is_empty(self) -> bool:
        """Return True if the set holds no elements."""
        return self._count == 0

    def iterator(self) -> HashSetIterator:
        """Return a cursor over the elements."""
        return HashSetIterator(self)

    def union(self, other: HashSet) -> None:
        """Add every element of other to this set."""
        for elem in other:
            self.add(elem)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, elem: object) -> bool:
        return isinstance(elem, int) and self.search(elem)

    def __iter__(self) -> Iterator[int]:
        return (key for key in self._keys if key is not None)


class HashSetIterator:
    """Cursor over the occupied slots of a HashSet, in table order."""

    def __init__(self, hash_set: HashSet) -> None:
        self._set = hash_set
        self._current = 0
        self.first()

    def _skip_empty(self, index: int) -> int:
        keys = self._set._keys
        while index < len(keys) and keys[index] is None:
            index += 1
        return index

    def first(self) -> None:
        """Move to the first element."""
        self._current = self._skip_empty(0)

    def valid(self) -> bool:
        """Return True while the cursor points at an element."""
        keys = self._set._keys
        return self._current < len(keys) and keys[self._current] is not None

    def next(self) -> None:
        """Advance to the next element; IndexError if the cursor is not valid."""
        if not self.valid():
            raise IndexError("iterator is not valid")
        self._current = self._skip_empty(self._current + 1)

    def get_current(self) -> int:
        """Return the current element; IndexError if the cursor is not valid."""
        if not self.valid():
            raise IndexError("iterator is not valid")
        return self._set._keys[self._current]
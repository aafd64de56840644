"""A sorted set of integers kept in a binary search tree ordered by a relation."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Optional

Relation = Callable[[int, int], bool]


@dataclass(eq=False)
class _Node:
    info: int
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    parent: Optional[_Node] = None


def _leftmost(node: Optional[_Node]) -> Optional[_Node]:
    if node is not None:
        while node.left is not None:
            node = node.left
    return node


def _successor(node: _Node) -> Optional[_Node]:
    if node.right is not None:
        return _leftmost(node.right)
    current = node
    parent = current.parent
    while parent is not None and parent.right is current:
        current = parent
        parent = parent.parent
    return parent


class SortedSet:
    """Set of integers ordered by a relation, stored in a binary search tree.

    ``relation(a, b)`` is true when ``a`` should come before (or together
    with) ``b``; iteration yields the elements in that order.
    """

    def __init__(self, relation: Relation) -> None:
        self._relation = relation
        self._root: Optional[_Node] = None
        self._count = 0

    def add(self, elem: int) -> bool:
        """Add elem; return False if it was already present."""
        if self._root is None:
            self._root = _Node(elem)
            self._count += 1
            return True

        current: Optional[_Node] = self._root
        prev = self._root
        while current is not None:
            if current.info == elem:
                return False
            prev = current
            current = current.left if self._relation(elem, current.info) else current.right

        node = _Node(elem, parent=prev)
        if self._relation(elem, prev.info):
            prev.left = node
        else:
            prev.right = node
        self._count += 1
        return True

    def _replace_child(self, parent: Optional[_Node], old: _Node, new: Optional[_Node]) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new
        if new is not None:
            new.parent = parent

    def remove(self, elem: int) -> bool:
        """Remove elem; return False if it was not present."""
        current = self._root
        prev: Optional[_Node] = None
        while current is not None and current.info != elem:
            prev = current
            current = current.left if self._relation(elem, current.info) else current.right

        if current is None:
            return False

        if current.left is None or current.right is None:
            child = current.left if current.left is not None else current.right
            self._replace_child(prev, current, child)
        else:
            successor = current.right
            while successor.left is not None:
                successor = successor.left
            current.info = successor.info
            self._replace_child(successor.parent, successor, successor.right)

        self._count -= 1
        return True

    def search(self, elem: int) -> bool:
        """Return True if elem is in the set."""
        current = self._root
        while current is not None:
            if current.info == elem:
                return True
            current = current.left if self._relation(elem, current.info) else current.right
        return False

    def size(self) -> int:
        """Return the number of elements."""
        return self._count

    def is_empty(self) -> bool:
        """Return True if the set holds no elements."""
        return self._count == 0

    def iterator(self) -> SortedSetIterator:
        """Return a cursor over the elements in relation order."""
        return SortedSetIterator(self)

    def is_subset_of(self, other: SortedSet) -> bool:
        """Return True if every element of this set is in other."""
        return all(other.search(elem) for elem in self)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, elem: object) -> bool:
        return isinstance(elem, int) and self.search(elem)

    def __iter__(self) -> Iterator[int]:
        node = _leftmost(self._root)
        while node is not None:
            yield node.info
            node = _successor(node)


class SortedSetIterator:
    """Cursor over a SortedSet in in-order (relation) order."""

    def __init__(self, sorted_set: SortedSet) -> None:
        self._set = sorted_set
        self._current: Optional[_Node] = None
        self.first()

    def first(self) -> None:
        """Move to the first element."""
        self._current = _leftmost(self._set._root)

    def valid(self) -> bool:
        """Return True while the cursor points at an element."""
        return self._current is not None

    def next(self) -> None:
        """Advance to the next element; IndexError if the cursor is not valid."""
        if self._current is None:
            raise IndexError("no next element")
        self._current = _successor(self._current)

    def get_current(self) -> int:
        """Return the current element; IndexError if the cursor is not valid."""
        if self._current is None:
            raise IndexError("invalid iterator")
        return self._current.info
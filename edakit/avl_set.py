"""Ordered sets backed by AVL search trees, with rank queries."""

from __future__ import annotations

import operator
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("elem", "left", "right", "height", "size")

    def __init__(
        self,
        elem: T,
        left: "Optional[_Node[T]]" = None,
        right: "Optional[_Node[T]]" = None,
    ) -> None:
        self.elem = elem
        self.left = left
        self.right = right
        self.height = 1
        self.size = 1
        _update(self)


def _height(node: Optional[_Node]) -> int:
    return 0 if node is None else node.height


def _size(node: Optional[_Node]) -> int:
    return 0 if node is None else node.size


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1
    node.size = _size(node.left) + _size(node.right) + 1


def _rotate_right(r2: _Node) -> _Node:
    r1 = r2.left
    r2.left = r1.right
    r1.right = r2
    _update(r2)
    _update(r1)
    return r1


def _rotate_left(r1: _Node) -> _Node:
    r2 = r1.right
    r1.right = r2.left
    r2.left = r1
    _update(r1)
    _update(r2)
    return r2


def _rebalance_left(node: _Node) -> _Node:
    """Restore balance when the right subtree may be too tall."""
    if _height(node.right) - _height(node.left) > 1:
        if _height(node.right.left) > _height(node.right.right):
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    _update(node)
    return node


def _rebalance_right(node: _Node) -> _Node:
    """Restore balance when the left subtree may be too tall."""
    if _height(node.left) - _height(node.right) > 1:
        if _height(node.left.right) > _height(node.left.left):
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    _update(node)
    return node


def _copy(node: Optional[_Node]) -> Optional[_Node]:
    if node is None:
        return None
    clone = _Node.__new__(_Node)
    clone.elem = node.elem
    clone.left = _copy(node.left)
    clone.right = _copy(node.right)
    clone.height = node.height
    clone.size = node.size
    return clone


class AVLSet(Generic[T]):
    """A set kept sorted by a strict ordering ``less``, iterated in order."""

    def __init__(
        self,
        items: Iterable[T] = (),
        less: Optional[Callable[[T, T], bool]] = None,
    ) -> None:
        self._less: Callable[[T, T], bool] = less if less is not None else operator.lt
        self._root: Optional[_Node[T]] = None
        for item in items:
            self.insert(item)

    def insert(self, elem: T) -> bool:
        """Add ``elem``; return False if an equivalent element was present."""
        self._root, inserted = self._insert(self._root, elem)
        return inserted

    def _insert(self, node: Optional[_Node[T]], elem: T) -> tuple[_Node[T], bool]:
        if node is None:
            return _Node(elem), True
        if self._less(elem, node.elem):
            node.left, inserted = self._insert(node.left, elem)
            if inserted:
                node = _rebalance_right(node)
        elif self._less(node.elem, elem):
            node.right, inserted = self._insert(node.right, elem)
            if inserted:
                node = _rebalance_left(node)
        else:
            inserted = False
        return node, inserted

    def erase(self, elem: T) -> bool:
        """Remove ``elem``; return False if it was not present."""
        self._root, removed = self._erase(self._root, elem)
        return removed

    def _erase(
        self, node: Optional[_Node[T]], elem: T
    ) -> tuple[Optional[_Node[T]], bool]:
        if node is None:
            return None, False
        if self._less(elem, node.elem):
            node.left, removed = self._erase(node.left, elem)
            if removed:
                node = _rebalance_left(node)
            return node, removed
        if self._less(node.elem, elem):
            node.right, removed = self._erase(node.right, elem)
            if removed:
                node = _rebalance_right(node)
            return node, removed
        if node.left is None or node.right is None:
            return (node.right if node.left is None else node.left), True
        node.right, smallest = self._remove_min(node.right)
        node.elem = smallest
        return _rebalance_right(node), True

    def _remove_min(self, node: _Node[T]) -> tuple[Optional[_Node[T]], T]:
        if node.left is None:
            return node.right, node.elem
        node.left, smallest = self._remove_min(node.left)
        return _rebalance_left(node), smallest

    def __contains__(self, elem: object) -> bool:
        node = self._root
        while node is not None:
            if self._less(elem, node.elem):
                node = node.left
            elif self._less(node.elem, elem):
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return _size(self._root)

    def __iter__(self) -> Iterator[T]:
        pending: list[_Node[T]] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.elem
            node = node.right

    def kth(self, k: int) -> T:
        """Return the k-th smallest element, counting from 1."""
        if k < 1 or k > len(self):
            raise IndexError(f"no element at position {k}")
        node = self._root
        while True:
            rank = _size(node.left) + 1
            if k < rank:
                node = node.left
            elif k > rank:
                k -= rank
                node = node.right
            else:
                return node.elem

    def copy(self) -> "AVLSet[T]":
        """Return an independent copy with the same ordering."""
        clone: AVLSet[T] = AVLSet(less=self._less)
        clone._root = _copy(self._root)
        return clone

    def __repr__(self) -> str:
        return f"AVLSet({list(self)!r})"
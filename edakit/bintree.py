"""Immutable binary trees with shared nodes and the usual traversals."""

from __future__ import annotations

from collections import deque
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

_MISSING: Any = object()


class EmptyTreeError(ValueError):
    """Raised when querying the root or children of an empty tree."""


class _Node(Generic[T]):
    __slots__ = ("left", "elem", "right")

    def __init__(
        self, left: "Optional[_Node[T]]", elem: T, right: "Optional[_Node[T]]"
    ) -> None:
        self.left = left
        self.elem = elem
        self.right = right


class BinTree(Generic[T]):
    """A binary tree; ``BinTree()`` is empty, ``BinTree(l, e, r)`` has root ``e``.

    ``left`` and ``right`` may be trees or None (meaning empty).
    Subtrees are shared, never copied.
    """

    def __init__(
        self,
        left: "Optional[BinTree[T]]" = None,
        elem: T = _MISSING,
        right: "Optional[BinTree[T]]" = None,
    ) -> None:
        if elem is _MISSING:
            if left is not None or right is not None:
                raise TypeError("a tree with children needs a root element")
            self._root: Optional[_Node[T]] = None
        else:
            self._root = _Node(
                left._root if left is not None else None,
                elem,
                right._root if right is not None else None,
            )

    @classmethod
    def leaf(cls, elem: T) -> "BinTree[T]":
        """Return a tree holding only ``elem``."""
        return cls(None, elem, None)

    @classmethod
    def _from_node(cls, node: Optional[_Node[T]]) -> "BinTree[T]":
        tree = cls()
        tree._root = node
        return tree

    def is_empty(self) -> bool:
        return self._root is None

    def root(self) -> T:
        if self._root is None:
            raise EmptyTreeError("an empty tree has no root")
        return self._root.elem

    def left(self) -> "BinTree[T]":
        if self._root is None:
            raise EmptyTreeError("an empty tree has no left child")
        return BinTree._from_node(self._root.left)

    def right(self) -> "BinTree[T]":
        if self._root is None:
            raise EmptyTreeError("an empty tree has no right child")
        return BinTree._from_node(self._root.right)

    def preorder(self) -> list[T]:
        result: list[T] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.elem)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def inorder(self) -> list[T]:
        return list(self)

    def postorder(self) -> list[T]:
        result: list[T] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.elem)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def levelorder(self) -> list[T]:
        result: list[T] = []
        pending = deque([self._root] if self._root is not None else [])
        while pending:
            node = pending.popleft()
            result.append(node.elem)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return result

    def __iter__(self) -> Iterator[T]:
        """Yield the elements in inorder."""
        ancestors: list[_Node[T]] = []
        node = self._root
        while ancestors or node is not None:
            while node is not None:
                ancestors.append(node)
                node = node.left
            node = ancestors.pop()
            yield node.elem
            node = node.right

    def __repr__(self) -> str:
        if self._root is None:
            return "BinTree()"
        return f"BinTree({self.left()!r}, {self._root.elem!r}, {self.right()!r})"


def read_tree(tokens: Iterable[Any], empty: T) -> BinTree[T]:
    """Build a tree from a preorder token stream where ``empty`` marks a missing subtree.

    String tokens are converted to the type of ``empty`` when it is not a string.
    """
    stream = iter(tokens)
    convert = None if isinstance(empty, str) else type(empty)

    def read() -> BinTree[T]:
        try:
            token = next(stream)
        except StopIteration:
            raise ValueError("unexpected end of input while reading a tree") from None
        if convert is not None and isinstance(token, str):
            token = convert(token)
        if token == empty:
            return BinTree()
        left = read()
        right = read()
        return BinTree(left, token, right)

    return read()
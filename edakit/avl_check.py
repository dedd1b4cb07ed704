"""Decide whether binary trees of integers are AVL trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from edakit.bintree import BinTree, read_tree


@dataclass(frozen=True)
class _Summary:
    height: int
    lowest: Any
    highest: Any


def _inspect(tree: BinTree) -> Optional[_Summary]:
    """Summarise a valid AVL subtree, or return None if it is not one."""
    if tree.is_empty():
        return _Summary(0, None, None)
    left = _inspect(tree.left())
    if left is None:
        return None
    right = _inspect(tree.right())
    if right is None:
        return None
    root = tree.root()
    if left.highest is not None and not left.highest < root:
        return None
    if right.lowest is not None and not root < right.lowest:
        return None
    if abs(left.height - right.height) > 1:
        return None
    return _Summary(
        max(left.height, right.height) + 1,
        root if left.lowest is None else left.lowest,
        root if right.highest is None else right.highest,
    )


def is_avl(tree: BinTree) -> bool:
    """Whether ``tree`` is a strictly ordered search tree with AVL balance."""
    return _inspect(tree) is not None


def run(text: str) -> str:
    """Answer SI/NO for each preorder tree (``-1`` marks an empty subtree)."""
    tokens = iter(text.split())
    try:
        cases = int(next(tokens))
    except StopIteration:
        return ""
    answers = []
    for _ in range(cases):
        tree = read_tree(tokens, -1)
        answers.append("SI" if is_avl(tree) else "NO")
    return "".join(f"{answer}\n" for answer in answers)
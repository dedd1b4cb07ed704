import pytest

from edakit.bintree import BinTree, EmptyTreeError, read_tree


def _sample():
    #        4
    #      2   6
    #     1 3 5
    return BinTree(
        BinTree(BinTree.leaf(1), 2, BinTree.leaf(3)),
        4,
        BinTree(BinTree.leaf(5), 6, None),
    )


def test_empty_tree():
    t = BinTree()
    assert t.is_empty() is True
    assert t.preorder() == []
    assert t.inorder() == []
    assert t.postorder() == []
    assert t.levelorder() == []


def test_root_and_children():
    t = _sample()
    assert t.is_empty() is False
    assert t.root() == 4
    assert t.left().root() == 2
    assert t.right().root() == 6
    assert t.right().right().is_empty() is True


def test_traversals():
    t = _sample()
    assert t.preorder() == [4, 2, 1, 3, 6, 5]
    assert t.postorder() == [1, 3, 2, 5, 6, 4]
    assert t.levelorder() == [4, 2, 6, 1, 3, 5]


def test_inorder_of_search_tree_is_sorted():
    t = _sample()
    assert t.inorder() == sorted(t.preorder())


def test_iteration_matches_inorder():
    t = _sample()
    assert list(t) == t.inorder()


def test_traversal_root_positions():
    t = _sample()
    assert t.preorder()[0] == t.root()
    assert t.postorder()[-1] == t.root()
    assert t.levelorder()[0] == t.root()


def test_subtrees_are_shared():
    sub = BinTree(BinTree.leaf(1), 2, BinTree.leaf(3))
    t = BinTree(sub, 4, None)
    assert t.left().inorder() == sub.inorder()


@pytest.mark.parametrize("query", ["root", "left", "right"])
def test_empty_tree_queries_raise(query):
    with pytest.raises(EmptyTreeError):
        getattr(BinTree(), query)()


def test_children_without_root_rejected():
    with pytest.raises(TypeError):
        BinTree(BinTree.leaf(1))


def test_read_tree_from_strings():
    t = read_tree("2 1 -1 -1 3 -1 -1".split(), -1)
    assert t.root() == 2
    assert t.inorder() == [1, 2, 3]
    assert t.preorder() == [2, 1, 3]


def test_read_tree_empty():
    t = read_tree(["-1"], -1)
    assert t.is_empty() is True


def test_read_tree_consumes_only_one_tree():
    tokens = iter("5 -1 -1 7 -1 -1".split())
    first = read_tree(tokens, -1)
    second = read_tree(tokens, -1)
    assert first.preorder() == [5]
    assert second.preorder() == [7]


def test_read_tree_with_string_marker():
    t = read_tree(["b", "a", ".", ".", "."], ".")
    assert t.inorder() == ["a", "b"]


def test_read_tree_truncated_input():
    with pytest.raises(ValueError):
        read_tree(["1", "-1"], -1)
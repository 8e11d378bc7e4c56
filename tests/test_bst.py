import pytest
from hypothesis import given, strategies as st

from avltrees.bst import BinarySearchTree


def _check_structure(tree):
    """Verify parent links and ordering; return in-order keys."""
    keys = []

    def walk(node, parent, low, high):
        if node is None:
            return
        assert node.parent is parent
        if low is not None:
            assert node.key > low
        if high is not None:
            assert node.key < high
        walk(node.left, node, low, node.key)
        keys.append(node.key)
        walk(node.right, node, node.key, high)

    walk(tree.root, None, None, None)
    return keys


def _build(keys):
    tree = BinarySearchTree()
    for k in keys:
        tree.insert(k, k * 10)
    return tree


def test_driver_scenario():
    bt = BinarySearchTree()
    assert bt.empty()
    bt.insert("a", 1)
    bt.insert("b", 2)
    assert list(bt.items()) == [("a", 1), ("b", 2)]
    assert bt.find("b") is not None and bt.find("b").value == 2
    bt.remove("b")
    assert list(bt.items()) == [("a", 1)]
    assert "b" not in bt


def test_empty_print(capsys):
    BinarySearchTree().print()
    assert capsys.readouterr().out == "<empty tree>\n\n"


def test_format_contains_legend():
    bt = BinarySearchTree()
    bt.insert("a", 1)
    bt.insert("b", 2)
    text = bt.format()
    assert "Tree Placeholders:------------------" in text
    assert "[01] -> (a, 1)" in text
    assert "[02] -> (b, 2)" in text


def test_insert_overwrites():
    bt = _build([5, 3, 8])
    bt.insert(3, "new")
    assert bt[3] == "new"
    assert len(bt) == 3


def test_getitem_missing_raises():
    bt = _build([1, 2])
    with pytest.raises(KeyError):
        bt.__getitem__(7)
    assert list(bt.items()) == [(1, 10), (2, 20)]
    assert len(bt) == 2


def test_find_missing_returns_none():
    assert _build([1, 2, 3]).find(4) is None


def test_is_balanced():
    assert not _build([1, 2, 3]).is_balanced()
    assert _build([2, 1, 3]).is_balanced()
    assert BinarySearchTree().is_balanced()


def test_clear():
    bt = _build([4, 2, 6])
    bt.clear()
    assert bt.empty()
    assert list(bt) == []


def test_remove_root_with_two_children():
    bt = _build([5, 3, 8, 1, 4, 7, 9])
    bt.remove(5)
    assert _check_structure(bt) == [1, 3, 4, 7, 8, 9]
    assert bt.root.key == 4


def test_remove_absent_key_is_noop():
    bt = _build([2, 1, 3])
    bt.remove(10)
    assert list(bt) == [1, 2, 3]


def test_predecessor_and_successor():
    bt = _build([5, 3, 8, 1, 4, 7, 9])
    node = bt.find(5)
    assert BinarySearchTree.predecessor(node).key == 4
    assert BinarySearchTree.successor(node).key == 7
    assert BinarySearchTree.predecessor(bt.find(1)) is None
    assert BinarySearchTree.successor(bt.find(9)) is None
    assert BinarySearchTree.successor(bt.find(4)).key == 5


@given(st.lists(st.integers(-50, 50)), st.lists(st.integers(-50, 50)))
def test_matches_dict(inserts, removals):
    bt = BinarySearchTree()
    expected = {}
    for k in inserts:
        bt.insert(k, -k)
        expected[k] = -k
    for k in removals:
        bt.remove(k)
        expected.pop(k, None)
    assert _check_structure(bt) == sorted(expected)
    assert list(bt.items()) == sorted(expected.items())
    assert len(bt) == len(expected)
    assert all(bt[k] == v for k, v in expected.items())
    assert all(k in bt for k in expected)
    assert bt.empty() == (not expected)
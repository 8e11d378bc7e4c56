from __future__ import annotations

from hypothesis import given, strategies as st

from avltrees.equal_paths import TreeNode, equal_paths, height


def _perfect(depth):
    if depth == 0:
        return None
    return TreeNode(depth, _perfect(depth - 1), _perfect(depth - 1))


def _chain(length):
    node = None
    for k in range(length):
        node = TreeNode(k, node, None) if k % 2 else TreeNode(k, None, node)
    return node


def _leftmost_leaf(node):
    while node.left is not None or node.right is not None:
        node = node.left if node.left is not None else node.right
    return node


def test_empty_tree_has_equal_paths():
    assert equal_paths(None) is True
    assert height(None) == 0


def test_single_node():
    assert equal_paths(TreeNode(1)) is True


def test_left_child_only():
    assert equal_paths(TreeNode(1, TreeNode(2))) is True


def test_two_children():
    assert equal_paths(TreeNode(1, TreeNode(2), TreeNode(3))) is True


def test_right_child_only():
    assert equal_paths(TreeNode(1, None, TreeNode(3))) is True


def test_uneven_leaves():
    root = TreeNode(1, TreeNode(2, None, TreeNode(4)), TreeNode(3))
    assert equal_paths(root) is False
    assert height(root) == -1


@given(st.integers(min_value=1, max_value=8))
def test_perfect_tree_height(depth):
    root = _perfect(depth)
    assert equal_paths(root)
    assert height(root) == depth


@given(st.integers(min_value=1, max_value=30))
def test_chain_height_equals_length(length):
    root = _chain(length)
    assert equal_paths(root)
    assert height(root) == length


@given(st.integers(min_value=2, max_value=7))
def test_extending_one_leaf_breaks_equality(depth):
    root = _perfect(depth)
    leaf = _leftmost_leaf(root)
    leaf.left = TreeNode(0)
    assert not equal_paths(root)
    assert height(root) == -1
# avltrees

Ordered key/value maps built on binary search trees.

- `avltrees.bst.BinarySearchTree` is a plain binary search tree that does no rebalancing.
- `avltrees.avl.AVLTree` offers the same interface. It keeps itself height-balanced
  with AVL rotations on every insert and remove.
- `avltrees.equal_paths` checks whether every leaf of a simple binary tree sits
  at the same depth.
- `avltrees.pretty` draws a tree as text, which helps while debugging.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using a tree

```python
from avltrees.avl import AVLTree

tree = AVLTree()
for key, value in [("c", 3), ("a", 1), ("b", 2)]:
    tree.insert(key, value)

tree.insert("a", 10)        # an existing key has its value replaced
print(list(tree.items()))   # [('a', 10), ('b', 2), ('c', 3)] in key order
print(list(tree))           # ['a', 'b', 'c']
print(tree["b"])            # 2
print("z" in tree, len(tree))
print(tree.is_balanced())   # True

tree.remove("b")            # removing a missing key does nothing
tree.print()                # draws the tree with numbered placeholders
```

Keys can be of any type that supports `<` and `==`.

- `tree[key]` raises `KeyError` when the key is missing.
- `tree.find(key)` returns the matching node, or `None` when the key is absent.
  A node has `key`, `value`, `parent`, `left` and `right` attributes, plus an
  `item` property that gives `(key, value)`. Nodes in an `AVLTree` are
  `AVLNode`s, which also carry a `balance`: the right subtree's height minus
  the left subtree's height.
- `empty()` tells whether the tree holds no entries.
- `clear()` removes every entry.
- `format()` returns the drawing as a string.
- `BinarySearchTree.predecessor(node)` and `BinarySearchTree.successor(node)`
  return the node's in-order neighbours, or `None`.

A node with two children is removed by first swapping it with its in-order
predecessor.

`BinarySearchTree` has the same methods as `AVLTree` but does no rebalancing.
Inserting three or more keys in sorted order therefore produces a chain, and
`is_balanced()` reports `False`.

## Equal leaf depths

```python
from avltrees.equal_paths import TreeNode, equal_paths, height

root = TreeNode(1, TreeNode(2), TreeNode(3))
equal_paths(root)               # True
equal_paths(TreeNode(1, TreeNode(2, None, TreeNode(4)), TreeNode(3)))  # False
```

An empty tree counts as having equal paths. `height(root)` returns the length of
the shared root-to-leaf path, or `-1` when the leaves sit at different depths.

## Drawing

`avltrees.pretty.format_tree(root)` returns a drawing of the subtree under a node
as a string.

- An empty tree is drawn as `<empty tree>`.
- At most six levels are drawn. When the tree is deeper, a line notes that the
  deeper levels were omitted.
- Each node appears as a two-digit placeholder. A legend below the drawing maps
  each placeholder to its `(key, value)` pair.

The module also provides two helpers:

- `subtree_height(root)` returns the height of a subtree, capped at six.
- `node_depth(root, node)` returns a node's depth below `root`, counting the
  root as 1. It returns `-1` when the depth is beyond six and `-2` when the node
  does not lead back to `root`.

## What it does not do

This is a library only. It installs no command-line program. Trees are held in
memory and are not saved or loaded.
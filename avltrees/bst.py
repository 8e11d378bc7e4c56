"""An unbalanced binary search tree keyed by any ordered type."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, Optional, TypeVar

from avltrees.pretty import format_tree

K = TypeVar("K")
V = TypeVar("V")


@dataclass(eq=False, repr=False)
class Node(Generic[K, V]):
    """A tree node linked to its parent and both children."""

    key: K
    value: V
    parent: Optional["Node[K, V]"] = None
    left: Optional["Node[K, V]"] = field(default=None)
    right: Optional["Node[K, V]"] = field(default=None)

    @property
    def item(self) -> tuple[K, V]:
        return (self.key, self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r}, {self.value!r})"


class BinarySearchTree(Generic[K, V]):
    """A map stored in an unbalanced binary search tree."""

    def __init__(self) -> None:
        self.root: Optional[Node[K, V]] = None

    def _make_node(self, key: K, value: V, parent: Optional[Node[K, V]]) -> Node[K, V]:
        return Node(key, value, parent)

    def insert(self, key: K, value: V) -> None:
        """Add ``key`` with ``value``, overwriting the value if the key exists."""
        if self.root is None:
            self.root = self._make_node(key, value, None)
            return
        existing = self._internal_find(key)
        if existing is not None:
            existing.value = value
            return
        node = self.root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = self._make_node(key, value, node)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = self._make_node(key, value, node)
                    return
                node = node.right

    def remove(self, key: K) -> None:
        """Remove ``key`` if present; a node with two children swaps with its predecessor first."""
        target = self._internal_find(key)
        if target is None:
            return

        if target.left is None and target.right is None:
            parent = target.parent
            if parent is None:
                self.root = None
            elif parent.left is target:
                parent.left = None
            else:
                parent.right = None
            target.parent = None
            return

        if target.left is not None and target.right is not None:
            self._node_swap(target, self.predecessor(target))

        child = target.left if target.left is not None else target.right
        parent = target.parent
        if parent is None:
            self.root = child
        elif parent.left is target:
            parent.left = child
        else:
            parent.right = child
        if child is not None:
            child.parent = parent
        target.parent = target.left = target.right = None

    def clear(self) -> None:
        """Remove every entry."""
        self.root = None

    def is_balanced(self) -> bool:
        """Return True if every node's subtrees differ in height by at most one."""
        return self._check_height(self.root) != -1

    def empty(self) -> bool:
        return self.root is None

    def find(self, key: K) -> Optional[Node[K, V]]:
        """Return the node holding ``key``, or None."""
        return self._internal_find(key)

    def format(self) -> str:
        """Render the tree as text."""
        return format_tree(self.root)

    def print(self) -> None:
        print(self.format())

    def _nodes(self) -> Iterator[Node[K, V]]:
        node = self._smallest_node()
        while node is not None:
            yield node
            node = self.successor(node)

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield ``(key, value)`` pairs in key order."""
        for node in self._nodes():
            yield node.key, node.value

    def __iter__(self) -> Iterator[K]:
        for node in self._nodes():
            yield node.key

    def __getitem__(self, key: K) -> V:
        node = self._internal_find(key)
        if node is None:
            raise KeyError("Invalid key")
        return node.value

    def __contains__(self, key: Any) -> bool:
        return self._internal_find(key) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    @staticmethod
    def predecessor(node: Optional[Node[K, V]]) -> Optional[Node[K, V]]:
        """Return the in-order predecessor of ``node``, or None."""
        if node is None:
            return None
        if node.left is not None:
            pred = node.left
            while pred.right is not None:
                pred = pred.right
            return pred
        parent = node.parent
        while parent is not None and node is parent.left:
            node, parent = parent, parent.parent
        return parent

    @staticmethod
    def successor(node: Optional[Node[K, V]]) -> Optional[Node[K, V]]:
        """Return the in-order successor of ``node``, or None."""
        if node is None:
            return None
        if node.right is not None:
            succ = node.right
            while succ.left is not None:
                succ = succ.left
            return succ
        parent = node.parent
        while parent is not None and node is parent.right:
            node, parent = parent, parent.parent
        return parent

    def _internal_find(self, key: Any) -> Optional[Node[K, V]]:
        node = self.root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def _smallest_node(self) -> Optional[Node[K, V]]:
        node = self.root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def _check_height(self, node: Optional[Node[K, V]]) -> int:
        if node is None:
            return 0
        left = self._check_height(node.left)
        if left == -1:
            return -1
        right = self._check_height(node.right)
        if right == -1:
            return -1
        if abs(left - right) > 1:
            return -1
        return max(left, right) + 1

    def _node_swap(self, n1: Optional[Node[K, V]], n2: Optional[Node[K, V]]) -> None:
        """Exchange the positions of two nodes in the tree."""
        if n1 is n2 or n1 is None or n2 is None:
            return
        n1p, n1r, n1lt = n1.parent, n1.right, n1.left
        n1_is_left = n1p is not None and n1 is n1p.left
        n2p, n2r, n2lt = n2.parent, n2.right, n2.left
        n2_is_left = n2p is not None and n2 is n2p.left

        n1.parent, n2.parent = n2.parent, n1.parent
        n1.left, n2.left = n2.left, n1.left
        n1.right, n2.right = n2.right, n1.right

        if n1r is n2:
            n2.right = n1
            n1.parent = n2
        elif n2r is n1:
            n1.right = n2
            n2.parent = n1
        elif n1lt is n2:
            n2.left = n1
            n1.parent = n2
        elif n2lt is n1:
            n1.left = n2
            n2.parent = n1

        if n1p is not None and n1p is not n2:
            if n1_is_left:
                n1p.left = n2
            else:
                n1p.right = n2
        if n1r is not None and n1r is not n2:
            n1r.parent = n2
        if n1lt is not None and n1lt is not n2:
            n1lt.parent = n2

        if n2p is not None and n2p is not n1:
            if n2_is_left:
                n2p.left = n1
            else:
                n2p.right = n1
        if n2r is not None and n2r is not n1:
            n2r.parent = n1
        if n2lt is not None and n2lt is not n1:
            n2lt.parent = n1

        if self.root is n1:
            self.root = n2
        elif self.root is n2:
            self.root = n1
"""A self-balancing AVL tree built on the binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from avltrees.bst import BinarySearchTree, K, Node, V


@dataclass(eq=False, repr=False)
class AVLNode(Node[K, V]):
    """A tree node that also records its balance: right height minus left height."""

    balance: int = 0


class AVLTree(BinarySearchTree[K, V]):
    """A map stored in a height-balanced AVL tree."""

    root: Optional[AVLNode[K, V]]

    def _make_node(self, key: K, value: V, parent: Optional[Node[K, V]]) -> AVLNode[K, V]:
        return AVLNode(key, value, parent)

    def insert(self, key: K, value: V) -> None:
        """Add ``key`` with ``value``, overwriting the value if the key exists."""
        if self.root is None:
            self.root = self._make_node(key, value, None)
            return
        existing = self._internal_find(key)
        if existing is not None:
            existing.value = value
            return

        parent = self.root
        while True:
            if key < parent.key:
                if parent.left is None:
                    inserted = parent.left = self._make_node(key, value, parent)
                    break
                parent = parent.left
            else:
                if parent.right is None:
                    inserted = parent.right = self._make_node(key, value, parent)
                    break
                parent = parent.right

        if parent.balance != 0:
            parent.balance = 0
            return
        parent.balance = -1 if parent.left is inserted else 1
        self._insert_fix(parent, inserted)

    def _insert_fix(self, p: AVLNode[K, V], n: AVLNode[K, V]) -> None:
        while p is not None and p.parent is not None:
            g = p.parent
            if p is g.left:
                g.balance -= 1
                if g.balance == -1:
                    p, n = g, p
                    continue
                if g.balance == -2:
                    if n is p.left:
                        self._rotate_right(g)
                        g.balance = p.balance = 0
                    else:
                        old = n.balance
                        self._rotate_left(p)
                        self._rotate_right(g)
                        if old == -1:
                            p.balance, g.balance = 0, 1
                        elif old == 0:
                            p.balance, g.balance = 0, 0
                        else:
                            p.balance, g.balance = -1, 0
                        n.balance = 0
            else:
                g.balance += 1
                if g.balance == 1:
                    p, n = g, p
                    continue
                if g.balance == 2:
                    if n is p.right:
                        self._rotate_left(g)
                        g.balance = p.balance = 0
                    else:
                        old = n.balance
                        self._rotate_right(p)
                        self._rotate_left(g)
                        if old == 1:
                            p.balance, g.balance = 0, -1
                        elif old == 0:
                            p.balance, g.balance = 0, 0
                        else:
                            p.balance, g.balance = 1, 0
                        n.balance = 0
            return

    def remove(self, key: K) -> None:
        """Remove ``key`` if present, rebalancing on the way up."""
        target = self._internal_find(key)
        if target is None:
            return

        if target.left is not None and target.right is not None:
            self._node_swap(target, self.predecessor(target))

        parent = target.parent
        diff = 0
        if parent is not None:
            diff = 1 if target is parent.left else -1

        child = target.left if target.left is not None else target.right
        if parent is None:
            self.root = child
        elif parent.left is target:
            parent.left = child
        else:
            parent.right = child
        if child is not None:
            child.parent = parent
        target.parent = target.left = target.right = None

        if parent is not None:
            self._remove_fix(parent, diff)

    def _remove_fix(self, n: Optional[AVLNode[K, V]], diff: int) -> None:
        while n is not None:
            p = n.parent
            ndiff = 0
            if p is not None:
                ndiff = 1 if n is p.left else -1

            total = n.balance + diff
            if total == -2:
                c = n.left
                if c.balance == -1:
                    self._rotate_right(n)
                    n.balance = c.balance = 0
                elif c.balance == 0:
                    self._rotate_right(n)
                    n.balance, c.balance = -1, 1
                    return
                else:
                    g = c.right
                    old = g.balance
                    self._rotate_left(c)
                    self._rotate_right(n)
                    if old == 1:
                        n.balance, c.balance = 0, -1
                    elif old == 0:
                        n.balance, c.balance = 0, 0
                    else:
                        n.balance, c.balance = 1, 0
                    g.balance = 0
            elif total == 2:
                c = n.right
                if c.balance == 1:
                    self._rotate_left(n)
                    n.balance = c.balance = 0
                elif c.balance == 0:
                    self._rotate_left(n)
                    n.balance, c.balance = 1, -1
                    return
                else:
                    g = c.left
                    old = g.balance
                    self._rotate_right(c)
                    self._rotate_left(n)
                    if old == 1:
                        n.balance, c.balance = -1, 0
                    elif old == 0:
                        n.balance, c.balance = 0, 0
                    else:
                        n.balance, c.balance = 0, 1
                    g.balance = 0
            elif total in (-1, 1):
                n.balance = total
                return
            else:
                n.balance = 0
            n, diff = p, ndiff

    def _node_swap(self, n1: Optional[Node[K, V]], n2: Optional[Node[K, V]]) -> None:
        super()._node_swap(n1, n2)
        if n1 is None or n2 is None or n1 is n2:
            return
        n1.balance, n2.balance = n2.balance, n1.balance

    def _replace_child(self, parent: Optional[AVLNode[K, V]], old: AVLNode[K, V], new: AVLNode[K, V]) -> None:
        new.parent = parent
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, node: Optional[AVLNode[K, V]]) -> Optional[AVLNode[K, V]]:
        if node is None or node.right is None:
            return None
        pivot = node.right
        parent = node.parent
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        pivot.left = node
        node.parent = pivot
        self._replace_child(parent, node, pivot)
        return pivot

    def _rotate_right(self, node: Optional[AVLNode[K, V]]) -> Optional[AVLNode[K, V]]:
        if node is None or node.left is None:
            return None
        pivot = node.left
        parent = node.parent
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        pivot.right = node
        node.parent = pivot
        self._replace_child(parent, node, pivot)
        return pivot
"""Check whether every leaf of a binary tree sits at the same depth."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A plain binary tree node holding an integer key."""

    key: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def height(root: Optional[TreeNode]) -> int:
    """Return the common root-to-leaf length, or -1 if leaves differ in depth."""
    if root is None:
        return 0
    left = height(root.left)
    right = height(root.right)
    if root.left is not None and root.right is not None and left != right:
        return -1
    if left == -1 or right == -1:
        return -1
    return max(left, right) + 1


def equal_paths(root: Optional[TreeNode]) -> bool:
    """Return True if all paths from a leaf to the root have the same length."""
    if root is None:
        return True
    return height(root) != -1
"""Binary search trees, AVL trees, an equal-leaf-depth check and a text tree printer."""

__version__ = "0.1.0"
__all__ = ["avl", "bst", "equal_paths", "pretty"]
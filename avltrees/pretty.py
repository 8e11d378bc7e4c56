"""Text rendering of binary search trees.

Works with any node object exposing ``key``, ``value``, ``parent``,
``left`` and ``right`` attributes.
"""

from __future__ import annotations

from typing import Any, Iterator

MAX_HEIGHT = 6
BOX_WIDTH = 4
PADDING = 2
ELEMENT_WIDTH = BOX_WIDTH + PADDING

EMPTY_TREE = "<empty tree>"
CLIPPED_NOTICE = "(deeper levels omitted due to space limitations)"
LEGEND_HEADER = "Tree Placeholders:------------------"


def node_depth(root: Any, node: Any) -> int:
    """Return the distance of ``node`` from ``root``, counting the root as 1.

    Returns -1 when the distance exceeds ``MAX_HEIGHT`` and -2 when the
    parent chain ends without reaching ``root``.
    """
    dist = 1
    while node is not root:
        if node is None:
            return -2
        dist += 1
        node = node.parent
        if dist > MAX_HEIGHT:
            return -1
    return dist


def subtree_height(root: Any) -> int:
    """Return the height of the subtree at ``root``, never looking deeper than ``MAX_HEIGHT``."""

    def measure(node: Any, depth: int) -> int:
        if node is None or depth > MAX_HEIGHT:
            return 0
        return max(measure(node.left, depth + 1), measure(node.right, depth + 1)) + 1

    return measure(root, 1)


def _in_order(root: Any) -> Iterator[Any]:
    stack: list[Any] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _branch(present: bool, pad: int, start: str, end: str) -> str:
    if not present:
        return " " * (pad // 2 + 3)
    return start + "\u2500" * max(pad // 2 - 1, 0) + end + "  "


def format_tree(root: Any) -> str:
    """Render the tree at ``root`` as boxed placeholders followed by a legend."""
    if root is None:
        return EMPTY_TREE + "\n"

    height = subtree_height(root)
    clipped = height > MAX_HEIGHT
    if clipped:
        height = MAX_HEIGHT

    final_row_width = ELEMENT_WIDTH * 2 ** (height - 1) - PADDING

    placeholders: dict[Any, int] = {}
    values: dict[Any, Any] = {}
    counter = 1
    for node in _in_order(root):
        if node_depth(root, node) != -1:
            if node.key not in placeholders:
                placeholders[node.key] = counter
                values[node.key] = node.value
            counter += 1

    def box(node: Any) -> str:
        if node is None:
            return " " * BOX_WIDTH
        return f"[{placeholders.get(node.key, 0):02d}]"

    lines: list[str] = []
    margin = final_row_width // 2 - BOX_WIDTH // 2
    pad = final_row_width - 2
    row: list[Any] = [root]

    for level in range(height):
        lines.append(" " * margin + (" " * pad).join(box(node) for node in row))

        pad = (pad - BOX_WIDTH) // 2
        margin -= pad // 2 + 2

        previous = row
        row = []
        for node in previous:
            if node is None:
                row.extend((None, None))
            else:
                row.extend((node.left, node.right))

        if level < height - 1:
            parts = [" " * (margin + 2)]
            for node in previous:
                parts.append(_branch(node is not None and node.left is not None, pad, "\u250c", "\u2518"))
                parts.append(_branch(node is not None and node.right is not None, pad, "\u2514", "\u2510"))
                parts.append(" " * (pad + 2))
            lines.append("".join(parts))

    lines.append("")
    if clipped:
        lines.append(CLIPPED_NOTICE)

    lines.append(LEGEND_HEADER)
    for key, placeholder in placeholders.items():
        lines.append(f"[{placeholder:02d}] -> ({key}, {values[key]})")

    return "\n".join(lines) + "\n"
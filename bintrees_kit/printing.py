"""ASCII rendering of binary trees."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .metrics import height
from .node import Node


def _put(row: list[str], column: int, char: str) -> None:
    if len(row) <= column:
        row.extend(" " * (column + 1 - len(row)))
    row[column] = char


def _draw(node: Optional[Node], offset: int, level: int, rows: list[list[str]]) -> int:
    """Draw the subtree into rows and return the width it occupies."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _draw(node.left, offset, level + 1, rows)
    right = _draw(node.right, offset + left + width, level + 1, rows)
    for i, char in enumerate(label):
        _put(rows[level], offset + left + i, char)
    if level:
        above = rows[level - 1]
        if is_left:
            start = offset + left + width // 2
            for i in range(width + right):
                _put(above, start + i, "-")
        else:
            start = offset - width // 2
            for i in range(left + width):
                _put(above, start + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the tree drawn as text, one line per level, without a final newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _draw(tree, 0, 0, rows)
    return "\n".join("".join(row).rstrip() for row in rows)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the rendered tree to ``file`` (standard output by default)."""
    if tree is None:
        return
    print(render(tree), file=file if file is not None else sys.stdout)
"""Measurements of binary trees: height, depth, size, counts and balance."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from .node import Node


def _walk(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _levels(tree: Optional[Node]) -> int:
    """Number of nodes on the longest downward path; 0 for an empty tree."""
    if tree is None:
        return 0
    levels = 0
    queue = deque([tree])
    while queue:
        levels += 1
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
    return levels


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path (0 if empty)."""
    return max(_levels(tree) - 1, 0)


def depth(node: Optional[Node]) -> int:
    """Return the number of edges from the node up to its root (0 if empty)."""
    count = 0
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _walk(tree) if node.is_leaf())


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _walk(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Return left height minus right height (0 if empty)."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)
"""Depth-first and breadth-first traversals yielding node values."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from .node import Node


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values in pre-order: node, left subtree, right subtree."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values in in-order: left subtree, node, right subtree."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values in post-order: left subtree, right subtree, node."""
    stack = [tree] if tree is not None else []
    collected: list[int] = []
    while stack:
        node = stack.pop()
        collected.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    yield from reversed(collected)


def levelorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values level by level, left to right."""
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node.value
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
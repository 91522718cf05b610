"""Structural predicates: full, perfect, complete, BST, AVL and heap."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from .metrics import balance
from .node import Node


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _children(node: Node) -> Iterator[Node]:
    if node.left is not None:
        yield node.left
    if node.right is not None:
        yield node.right


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _nodes(tree))


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all leaves share one depth."""
    if tree is None:
        return False
    leaf_depths = set()
    stack = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        if node.is_leaf():
            leaf_depths.add(level)
            continue
        if node.left is None or node.right is None:
            return False
        stack.append((node.right, level + 1))
        stack.append((node.left, level + 1))
    return len(leaf_depths) == 1


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled left to right without gaps."""
    if tree is None:
        return False
    queue = deque([tree])
    seen_gap = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                seen_gap = True
            elif seen_gap:
                return False
            else:
                queue.append(child)
    return True


def _within_bounds(tree: Node) -> Iterator[bool]:
    stack: list[tuple[Node, Optional[int], Optional[int]]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        value = node.value
        yield (low is None or value > low) and (high is None or value < high)
        if node.left is not None:
            stack.append((node.left, low, value))
        if node.right is not None:
            stack.append((node.right, value, high))


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if the tree is a binary search tree with distinct values."""
    if tree is None:
        return False
    return all(_within_bounds(tree))


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if the tree is a BST whose subtree heights differ by at most 1."""
    if tree is None:
        return False
    return is_bst(tree) and all(abs(balance(node)) <= 1 for node in _nodes(tree))


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if the tree is complete and each parent exceeds its children."""
    if tree is None or not is_complete(tree):
        return False
    return all(
        node.value > child.value for node in _nodes(tree) for child in _children(node)
    )
"""AVL tree operations built on the search tree and rotations."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from . import bst
from .bst import Insertion
from .metrics import balance
from .node import Node
from .rotation import rotate_left, rotate_right


def _fix_after_insert(node: Node, value: int) -> Node:
    """Rotate ``node`` if unbalanced by inserting ``value``; return subtree root."""
    factor = balance(node)
    if factor > 1 and node.left is not None:
        if node.left.value > value:
            return rotate_right(node)
        if node.left.value < value:
            rotate_left(node.left)
            return rotate_right(node)
    elif factor < -1 and node.right is not None:
        if node.right.value < value:
            return rotate_left(node)
        if node.right.value > value:
            rotate_right(node.right)
            return rotate_left(node)
    return node


def insert(root: Optional[Node], value: int) -> Insertion:
    """Insert ``value`` and rebalance.

    Returns the new root and the created node. Raises ValueError if the
    value is already present.
    """
    result = bst.insert(root, value)
    new_root = result.root
    current = result.node.parent
    while current is not None:
        subtree = _fix_after_insert(current, value)
        if subtree.parent is None:
            new_root = subtree
        current = subtree.parent
    return Insertion(new_root, result.node)


def from_iterable(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree by inserting values in order, skipping repeats."""
    root: Optional[Node] = None
    seen: set[int] = set()
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        root = insert(root, value).root
    return root


def _rebalance(node: Optional[Node]) -> Optional[Node]:
    """Rebalance every subtree bottom-up and return the subtree's root."""
    if node is None or node.is_leaf():
        return node
    _rebalance(node.left)
    _rebalance(node.right)
    factor = balance(node)
    if factor > 1:
        if balance(node.left) < 0:
            rotate_left(node.left)
        return rotate_right(node)
    if factor < -1:
        if balance(node.right) > 0:
            rotate_right(node.right)
        return rotate_left(node)
    return node


def remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove ``value`` and rebalance, returning the new root.

    If the value is absent the tree is returned unchanged.
    """
    if root is None:
        return None
    try:
        root = bst.remove(root, value)
    except ValueError:
        return root
    return _rebalance(root)


def _build(values: Sequence[int], low: int, high: int, parent: Optional[Node]) -> Optional[Node]:
    count = high - low
    if count <= 0:
        return None
    middle = low + (count // 2 if count % 2 else count // 2 - 1)
    node = Node(values[middle], parent)
    node.left = _build(values, low, middle, node)
    node.right = _build(values, middle + 1, high, node)
    return node


def from_sorted(values: Iterable[int]) -> Optional[Node]:
    """Build a balanced tree from sorted values; the lower middle becomes root."""
    items = list(values)
    return _build(items, 0, len(items), None)
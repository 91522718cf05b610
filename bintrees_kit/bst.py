"""Binary search tree operations on parent-linked nodes."""

from __future__ import annotations

from typing import Iterable, NamedTuple, Optional

from .node import Node


class Insertion(NamedTuple):
    """Result of an insertion: the tree's root and the node that was added."""

    root: Node
    node: Node


def _attach(root: Optional[Node], value: int) -> Insertion:
    """Add a leaf holding ``value`` at its search position, without rebalancing."""
    if root is None:
        new = Node(value)
        return Insertion(new, new)
    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = Node(value, current)
                return Insertion(root, current.left)
            current = current.left
        elif value > current.value:
            if current.right is None:
                current.right = Node(value, current)
                return Insertion(root, current.right)
            current = current.right
        else:
            raise ValueError(f"value {value} is already in the tree")


def insert(root: Optional[Node], value: int) -> Insertion:
    """Insert ``value`` into the search tree rooted at ``root``.

    Returns the (possibly new) root and the created node. Raises ValueError
    if the value is already present.
    """
    return _attach(root, value)


def from_iterable(values: Iterable[int]) -> Optional[Node]:
    """Build a search tree by inserting values in order, skipping repeats."""
    root: Optional[Node] = None
    seen: set[int] = set()
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        root = insert(root, value).root
    return root


def search(root: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding ``value``, or None if it is absent."""
    node = root
    while node is not None:
        if node.value == value:
            return node
        node = node.left if node.value > value else node.right
    return None


def _splice(root: Node, node: Node, child: Optional[Node]) -> Optional[Node]:
    """Replace ``node`` by its only child (or nothing) and return the root."""
    parent = node.parent
    if parent is not None:
        if parent.left is node:
            parent.left = child
        else:
            parent.right = child
    if child is not None:
        child.parent = parent
    node.parent = node.left = node.right = None
    return child if parent is None else root


def _delete(root: Node, node: Node) -> Optional[Node]:
    if node.left is None:
        return _splice(root, node, node.right)
    if node.right is None:
        return _splice(root, node, node.left)
    successor = node.right
    while successor.left is not None:
        successor = successor.left
    node.value = successor.value
    return _splice(root, successor, successor.right)


def remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove ``value`` from the tree and return the new root.

    A node with two children takes the value of its in-order successor.
    Raises ValueError if the value is not in the tree.
    """
    node = search(root, value)
    if root is None or node is None:
        raise ValueError(f"value {value} is not in the tree")
    return _delete(root, node)
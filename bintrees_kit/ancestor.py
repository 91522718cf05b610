"""Lowest common ancestor of two nodes."""

from __future__ import annotations

from typing import Optional

from .node import Node


def lowest_common_ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the deepest node that is an ancestor of both nodes.

    A node counts as its own ancestor. Returns None if either node is
    missing or the nodes belong to different trees.
    """
    if first is None or second is None:
        return None
    ancestors = set()
    node: Optional[Node] = first
    while node is not None:
        ancestors.add(node)
        node = node.parent
    node = second
    while node is not None:
        if node in ancestors:
            return node
        node = node.parent
    return None
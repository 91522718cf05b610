"""Left and right rotations of binary trees."""

from __future__ import annotations

from typing import Optional

from .node import Node


def _replace_child(parent: Optional[Node], old: Node, new: Node) -> None:
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new


def rotate_left(tree: Optional[Node]) -> Node:
    """Rotate the tree left and return its new root.

    Raises ValueError if the tree is empty or has no right child.
    """
    if tree is None or tree.right is None:
        raise ValueError("cannot rotate left: tree has no right child")
    pivot = tree.right
    inner = pivot.left
    pivot.left = tree
    tree.right = inner
    if inner is not None:
        inner.parent = tree
    parent = tree.parent
    tree.parent = pivot
    pivot.parent = parent
    _replace_child(parent, tree, pivot)
    return pivot


def rotate_right(tree: Optional[Node]) -> Node:
    """Rotate the tree right and return its new root.

    Raises ValueError if the tree is empty or has no left child.
    """
    if tree is None or tree.left is None:
        raise ValueError("cannot rotate right: tree has no left child")
    pivot = tree.left
    inner = pivot.right
    pivot.right = tree
    tree.left = inner
    if inner is not None:
        inner.parent = tree
    parent = tree.parent
    tree.parent = pivot
    pivot.parent = parent
    _replace_child(parent, tree, pivot)
    return pivot
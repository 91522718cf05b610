"""Max binary heap operations on parent-linked nodes."""

from __future__ import annotations

from typing import Iterable, NamedTuple, Optional

from .bst import Insertion
from .metrics import size
from .node import Node


class Extraction(NamedTuple):
    """Result of an extraction: the removed value and the heap's new root."""

    value: int
    root: Optional[Node]


def _node_at(root: Node, position: int) -> Node:
    """Return the node at a 1-based level-order position of a complete tree.

    The binary digits of ``position`` after the leading one spell the path
    from the root: 0 goes left, 1 goes right.
    """
    node = root
    for bit in bin(position)[3:]:
        child = node.right if bit == "1" else node.left
        if child is None:
            raise ValueError("tree is not a complete binary tree")
        node = child
    return node


def _swap_values(first: Node, second: Node) -> None:
    first.value, second.value = second.value, first.value


def insert(root: Optional[Node], value: int) -> Insertion:
    """Insert ``value`` into the max heap rooted at ``root``.

    The value is placed in the first free slot of the bottom level and then
    moved up while it exceeds its parent. Returns the heap's root and the
    node that ends up holding the value.
    """
    if root is None:
        new = Node(value)
        return Insertion(new, new)
    position = size(root) + 1
    parent = _node_at(root, position // 2)
    new = Node(value, parent)
    if position % 2:
        parent.right = new
    else:
        parent.left = new
    node = new
    while node.parent is not None and node.value > node.parent.value:
        _swap_values(node, node.parent)
        node = node.parent
    return Insertion(root, node)


def from_iterable(values: Iterable[int]) -> Optional[Node]:
    """Build a max heap by inserting values in order."""
    root: Optional[Node] = None
    for value in values:
        root = insert(root, value).root
    return root


def _sift_down(root: Node) -> None:
    node = root
    while node.left is not None:
        if node.right is None or node.left.value > node.right.value:
            child = node.left
        else:
            child = node.right
        if node.value > child.value:
            break
        _swap_values(node, child)
        node = child


def extract(root: Optional[Node]) -> Extraction:
    """Remove the root value of the max heap.

    The last node of the bottom level replaces the root and is sifted down.
    Returns the removed value and the new root (None once the heap is
    empty). Raises IndexError if the heap is empty.
    """
    if root is None:
        raise IndexError("extract from an empty heap")
    value = root.value
    if root.is_leaf():
        return Extraction(value, None)
    last = _node_at(root, size(root))
    root.value = last.value
    last.detach()
    _sift_down(root)
    return Extraction(value, root)


def to_sorted_list(root: Optional[Node]) -> list[int]:
    """Empty the heap and return its values in descending order."""
    result: list[int] = []
    while root is not None:
        value, root = extract(root)
        result.append(value)
    return result
"""Binary tree node with parent links and basic structural queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value.

    Creating a node with a ``parent`` only records the parent link; it does
    not attach the node as a child. Use :meth:`insert_left` or
    :meth:`insert_right` to grow a tree.
    """

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child moves below it."""
        new = Node(value, self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child moves below it."""
        new = Node(value, self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    def detach(self) -> None:
        """Remove this node and its subtree from the tree it belongs to."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        self.parent = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, if any."""
        if self.parent is None or self.parent.parent is None:
            return None
        return self.parent.sibling()
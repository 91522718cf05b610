"""Binary trees, search trees, AVL trees and max heaps built from parent-linked nodes."""

__version__ = "0.1.0"

__all__ = [
    "ancestor",
    "avl",
    "bst",
    "heap",
    "metrics",
    "node",
    "printing",
    "properties",
    "rotation",
    "traversal",
]
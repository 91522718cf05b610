# bintrees_kit

A small library for binary trees made of linked nodes. Every node holds an
integer `value` and links to its `parent`, `left` child and `right` child.
The same node type serves plain binary trees, binary search trees, AVL trees
and max binary heaps.

## Modules

### `bintrees_kit.node`

`Node(value, parent=None, left=None, right=None)` is a dataclass. Nodes
compare by identity. Passing `parent` only records the link; it does not
make the new node a child of that parent. To grow a tree use:

- `insert_left(value)` / `insert_right(value)`: create a new child on that
  side and return it. An existing child on that side moves down to become the
  new node's child on the same side.
- `detach()`: cut the node and its subtree loose from its parent.
- `is_leaf()`, `is_root()`: structural checks.
- `sibling()`, `uncle()`: the other child of the parent, and the sibling of
  the parent, or `None`.

### `bintrees_kit.traversal`

`preorder`, `inorder`, `postorder` and `levelorder` are generators yielding
node values. Each accepts `None` and then yields nothing.

### `bintrees_kit.metrics`

- `height(tree)`: edges on the longest downward path (0 for a single node or
  `None`).
- `depth(node)`: edges from the node up to its root.
- `size(tree)`, `leaves(tree)`, `internal_nodes(tree)`: node counts (all
  nodes, nodes without children, nodes with at least one child).
- `balance(tree)`: height of the left subtree minus height of the right.

### `bintrees_kit.properties`

`is_full`, `is_perfect`, `is_complete`, `is_bst`, `is_avl` and `is_heap`
return `False` for `None`. `is_bst` requires distinct values; `is_heap`
requires a complete tree in which every parent is strictly larger than its
children.

### `bintrees_kit.rotation`

`rotate_left(tree)` and `rotate_right(tree)` rotate in place, fix the parent
links (including the link from the old root's parent) and return the new
subtree root. They raise `ValueError` when the needed child is missing.

### `bintrees_kit.ancestor`

`lowest_common_ancestor(first, second)` returns the deepest node that is an
ancestor of both (a node counts as its own ancestor), or `None` if either
argument is `None` or the nodes are in different trees.

### `bintrees_kit.bst`

- `insert(root, value)` returns an `Insertion(root, node)` named tuple: the
  tree's root (a new one if `root` was `None`) and the created node. It
  raises `ValueError` if the value is already present.
- `from_iterable(values)` builds a tree by inserting in order, skipping
  repeated values; it returns the root, or `None` for no values.
- `search(root, value)` returns the node holding the value, or `None`.
- `remove(root, value)` returns the new root (`None` once the tree is empty).
  A node with two children takes the value of its in-order successor. It
  raises `ValueError` if the value is not in the tree.

### `bintrees_kit.avl`

- `insert(root, value)` inserts and rebalances with rotations, returning an
  `Insertion(root, node)`; repeated values raise `ValueError`.
- `from_iterable(values)` inserts in order, skipping repeats.
- `remove(root, value)` removes the value and rebalances, returning the new
  root. An absent value leaves the tree unchanged.
- `from_sorted(values)` builds a balanced tree from already sorted values;
  when a range has an even length, the lower of the two middle values
  becomes the subtree root.

### `bintrees_kit.heap`

- `insert(root, value)` places the value in the first free slot of the
  bottom level and moves it up while it exceeds its parent. It returns an
  `Insertion(root, node)` where `node` is the node that ends up holding the
  value.
- `from_iterable(values)` builds a max heap by inserting in order.
- `extract(root)` returns an `Extraction(value, root)` named tuple: the
  removed maximum and the new root (`None` once the heap is empty). It
  raises `IndexError` on an empty heap.
- `to_sorted_list(root)` empties the heap and returns its values in
  descending order.

### `bintrees_kit.printing`

- `render(tree)` draws the tree as text, one line per level, each value
  shown as `(NNN)` with at least three digits. It returns `""` for `None`.
- `print_tree(tree, file=None)` writes that drawing to `file`, or to
  standard output by default; it writes nothing for `None`.

## Example

```python
from bintrees_kit import avl, heap, properties, traversal
from bintrees_kit.printing import print_tree

root = avl.from_iterable([98, 402, 12, 46, 128, 256, 512, 50])
print(list(traversal.inorder(root)))   # values in ascending order
print(properties.is_avl(root))         # True
print_tree(root)

h = heap.from_iterable([5, 17, 3, 42, 8])
print(heap.to_sorted_list(h))          # [42, 17, 8, 5, 3]
```

## Scope

This is a library only: it has no command-line program. Trees live in
memory and are not saved or loaded.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```
import random

import pytest

from bintrees_kit import heap
from bintrees_kit.metrics import size
from bintrees_kit.properties import is_complete, is_heap
from bintrees_kit.traversal import levelorder


def _distinct(seed, count):
    rng = random.Random(seed)
    return rng.sample(range(-500, 500), count)


def _check_parent_links(root):
    stack = [root]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node
                stack.append(child)


def test_insert_into_empty_creates_root():
    result = heap.insert(None, 98)
    assert result.root is result.node
    assert result.root.value == 98
    assert result.root.parent is None
    assert result.root.is_leaf()


def test_insert_returns_node_holding_value_after_sift():
    root = heap.insert(None, 1).root
    result = heap.insert(root, 2)
    assert result.root is root
    assert result.node is root
    assert root.value == 2
    assert root.left.value == 1


def test_insert_small_value_stays_at_bottom():
    root = heap.from_iterable([50, 40])
    result = heap.insert(root, 10)
    assert result.node is root.right
    assert result.node.value == 10


def test_insert_fills_levels_left_to_right():
    root = heap.from_iterable([3, 1, 2])
    assert list(levelorder(root)) == [3, 1, 2]


@pytest.mark.parametrize("count", [1, 2, 3, 7, 8, 15, 16, 40])
def test_from_iterable_builds_valid_heap(count):
    values = _distinct(count, count)
    root = heap.from_iterable(values)
    assert size(root) == count
    assert is_heap(root)
    assert is_complete(root)
    assert sorted(levelorder(root)) == sorted(values)
    assert root.value == max(values)
    _check_parent_links(root)


def test_from_iterable_empty():
    assert heap.from_iterable([]) is None


def test_from_iterable_keeps_duplicates():
    values = [5, 5, 3, 5, 1]
    root = heap.from_iterable(values)
    assert size(root) == len(values)
    assert sorted(levelorder(root)) == sorted(values)
    assert root.value == 5


def test_extract_empty_raises():
    with pytest.raises(IndexError):
        heap.extract(None)


def test_extract_single_node_empties_heap():
    root = heap.from_iterable([42])
    value, new_root = heap.extract(root)
    assert value == 42
    assert new_root is None


def test_extract_returns_max_and_keeps_heap():
    values = _distinct(7, 20)
    root = heap.from_iterable(values)
    value, root = heap.extract(root)
    assert value == max(values)
    assert size(root) == len(values) - 1
    assert is_heap(root)
    remaining = sorted(values)[:-1]
    assert sorted(levelorder(root)) == remaining
    _check_parent_links(root)


def test_repeated_extract_yields_descending_values():
    values = _distinct(11, 31)
    root = heap.from_iterable(values)
    extracted = []
    while root is not None:
        value, root = heap.extract(root)
        extracted.append(value)
        if root is not None:
            assert is_heap(root)
    assert extracted == sorted(values, reverse=True)


def test_to_sorted_list_descending():
    values = [98, 402, 12, 46, 128, 256, 512, 50]
    root = heap.from_iterable(values)
    assert heap.to_sorted_list(root) == sorted(values, reverse=True)


def test_to_sorted_list_empty():
    assert heap.to_sorted_list(None) == []


@pytest.mark.parametrize("seed", range(5))
def test_to_sorted_list_matches_sorted(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(rng.randint(1, 60))]
    root = heap.from_iterable(values)
    assert heap.to_sorted_list(root) == sorted(values, reverse=True)


def test_insert_after_extract_keeps_heap():
    values = _distinct(3, 12)
    root = heap.from_iterable(values)
    _, root = heap.extract(root)
    _, root = heap.extract(root)
    root = heap.insert(root, 1000).root
    assert root.value == 1000
    assert is_heap(root)
    assert size(root) == len(values) - 1
    _check_parent_links(root)
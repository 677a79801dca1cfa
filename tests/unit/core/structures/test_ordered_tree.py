from __future__ import annotations

"""
Unit tests for the Ordered Tree container.

Verifies:
1. Insertion ordering, duplicate rejection and size/height bookkeeping.
2. Search and find-or-insert semantics.
3. Minimum/maximum removal, including on an empty tree.
4. Snapshot, one-shot traversal iterators in all three orders.
5. Independence of separate tree instances and deep (sorted) input.
"""

import pickle
import random
from typing import List

import pytest

from wordtracker.core.structures.ordered_tree import OrderedTree


def build_tree(keys: List[int]) -> OrderedTree[int]:
    """Helper to populate a tree in the given insertion order."""
    tree: OrderedTree[int] = OrderedTree()
    for k in keys:
        tree.insert(k)
    return tree


@pytest.fixture
def sample_tree() -> OrderedTree[int]:
    """
    Tree with shape:
            50
          /    \\
        30      70
       /  \\    /
     20   40  60
    """
    return build_tree([50, 30, 70, 20, 40, 60])


# -----------------------------------------------------------------------------
# EMPTY STATE
# -----------------------------------------------------------------------------

def test_new_tree_is_empty() -> None:
    tree: OrderedTree[int] = OrderedTree()
    assert tree.size() == 0
    assert tree.is_empty()
    assert tree.height() == 0
    assert list(tree.inorder()) == []
    assert not tree


def test_root_of_empty_tree_raises() -> None:
    with pytest.raises(LookupError):
        _ = OrderedTree().root


def test_remove_on_empty_tree_returns_none() -> None:
    tree: OrderedTree[int] = OrderedTree()
    assert tree.remove_min() is None
    assert tree.remove_max() is None
    assert tree.size() == 0
    assert tree.height() == 0


# -----------------------------------------------------------------------------
# INSERTION & LOOKUP
# -----------------------------------------------------------------------------

def test_insert_unique_keys_sorted_inorder() -> None:
    keys = random.Random(7).sample(range(1000), 200)
    tree = build_tree(keys)

    assert tree.size() == 200
    assert list(tree.inorder()) == sorted(keys)


def test_insert_duplicate_is_rejected_without_change(sample_tree: OrderedTree[int]) -> None:
    size_before = sample_tree.size()
    height_before = sample_tree.height()

    assert sample_tree.insert(40) is False

    assert sample_tree.size() == size_before
    assert sample_tree.height() == height_before
    for k in (50, 30, 70, 20, 40, 60):
        node = sample_tree.search(k)
        assert node is not None
        assert node.element == k


def test_search_absent_key_returns_none(sample_tree: OrderedTree[int]) -> None:
    assert sample_tree.search(45) is None
    assert sample_tree.contains(45) is False
    assert 45 not in sample_tree
    assert 60 in sample_tree


def test_membership_operator_rejects_none_like_contains(sample_tree: OrderedTree[int]) -> None:
    with pytest.raises(ValueError):
        _ = None in sample_tree


@pytest.mark.parametrize("op", ["search", "contains", "insert", "get_or_insert"])
def test_none_key_is_invalid_argument(sample_tree: OrderedTree[int], op: str) -> None:
    with pytest.raises(ValueError):
        getattr(sample_tree, op)(None)
    assert sample_tree.size() == 6


def test_get_or_insert_returns_stored_instance() -> None:
    tree: OrderedTree[List[int]] = OrderedTree()
    first = [1]
    probe = [1]

    assert tree.get_or_insert(first) is first
    # An equal probe resolves to the object already held by the tree
    assert tree.get_or_insert(probe) is first
    assert tree.size() == 1


def test_height_counts_nodes(sample_tree: OrderedTree[int]) -> None:
    assert build_tree([1]).height() == 1
    assert sample_tree.height() == 3
    sample_tree.insert(10)
    assert sample_tree.height() == 4


def test_root_holds_first_insert(sample_tree: OrderedTree[int]) -> None:
    root = sample_tree.root
    assert root.element == 50
    assert root.left is not None and root.left.element == 30
    assert root.right is not None and root.right.element == 70


# -----------------------------------------------------------------------------
# REMOVAL
# -----------------------------------------------------------------------------

def test_remove_min_matches_first_inorder(sample_tree: OrderedTree[int]) -> None:
    while not sample_tree.is_empty():
        expected = list(sample_tree.inorder())[0]
        size_before = sample_tree.size()

        node = sample_tree.remove_min()

        assert node is not None
        assert node.element == expected
        assert sample_tree.size() == size_before - 1
    assert sample_tree.remove_min() is None


def test_remove_max_matches_last_inorder(sample_tree: OrderedTree[int]) -> None:
    while not sample_tree.is_empty():
        expected = list(sample_tree.inorder())[-1]
        size_before = sample_tree.size()

        node = sample_tree.remove_max()

        assert node is not None
        assert node.element == expected
        assert sample_tree.size() == size_before - 1
    assert sample_tree.remove_max() is None


def test_remove_min_reattaches_right_child() -> None:
    tree = build_tree([50, 20, 30, 25])
    node = tree.remove_min()

    assert node is not None and node.element == 20
    assert node.left is None and node.right is None
    assert list(tree.inorder()) == [25, 30, 50]
    assert tree.root.left is not None and tree.root.left.element == 30


def test_remove_max_at_root_promotes_left_subtree() -> None:
    tree = build_tree([50, 30, 20])
    node = tree.remove_max()

    assert node is not None and node.element == 50
    assert tree.root.element == 30
    assert list(tree.inorder()) == [20, 30]


def test_clear_resets_state(sample_tree: OrderedTree[int]) -> None:
    sample_tree.clear()
    assert sample_tree.size() == 0
    assert sample_tree.height() == 0
    assert sample_tree.search(50) is None
    assert sample_tree.insert(50) is True


# -----------------------------------------------------------------------------
# TRAVERSAL
# -----------------------------------------------------------------------------

def test_traversal_orders(sample_tree: OrderedTree[int]) -> None:
    assert list(sample_tree.inorder()) == [20, 30, 40, 50, 60, 70]
    assert list(sample_tree.preorder()) == [50, 30, 20, 40, 70, 60]
    assert list(sample_tree.postorder()) == [20, 40, 30, 60, 70, 50]


def test_iterator_is_one_shot(sample_tree: OrderedTree[int]) -> None:
    it = sample_tree.inorder()
    assert it.has_next()
    assert len(list(it)) == 6
    assert not it.has_next()
    assert list(it) == []
    with pytest.raises(StopIteration):
        next(it)


def test_iterator_is_a_snapshot(sample_tree: OrderedTree[int]) -> None:
    it = sample_tree.inorder()
    first = next(it)

    sample_tree.insert(10)
    sample_tree.remove_max()

    assert first == 20
    assert list(it) == [30, 40, 50, 60, 70]
    assert list(sample_tree.inorder()) == [10, 20, 30, 40, 50, 60]


# -----------------------------------------------------------------------------
# INSTANCE ISOLATION & SCALE
# -----------------------------------------------------------------------------

def test_instances_do_not_share_state() -> None:
    a = build_tree([1, 2, 3])
    b: OrderedTree[int] = OrderedTree()

    assert a.size() == 3
    assert b.size() == 0
    b.insert(99)
    assert list(a.inorder()) == [1, 2, 3]
    assert list(b.inorder()) == [99]


def test_sorted_input_builds_deep_tree_without_recursion_error() -> None:
    n = 2000
    tree = build_tree(list(range(n)))

    assert tree.height() == n
    assert list(tree.inorder()) == list(range(n))
    assert list(tree.postorder())[-1] == 0
    assert tree.remove_max().element == n - 1  # type: ignore[union-attr]

    restored = pickle.loads(pickle.dumps(tree))
    assert restored.size() == n - 1
    assert restored.height() == n - 1


def test_pickle_preserves_shape(sample_tree: OrderedTree[int]) -> None:
    restored = pickle.loads(pickle.dumps(sample_tree))

    assert restored is not sample_tree
    assert list(restored.preorder()) == list(sample_tree.preorder())
    assert list(restored.inorder()) == list(sample_tree.inorder())
    assert restored.size() == sample_tree.size()


class CountingKey:
    """Integer key that counts every ordering comparison made on it."""

    comparisons = 0

    def __init__(self, value: int) -> None:
        self.value = value

    def __lt__(self, other: CountingKey) -> bool:
        CountingKey.comparisons += 1
        return self.value < other.value


def test_snapshot_load_is_linear_on_deep_tree() -> None:
    n = 1000
    tree: OrderedTree[CountingKey] = OrderedTree()
    for i in range(n):
        tree.insert(CountingKey(i))
    state = tree.__getstate__()

    CountingKey.comparisons = 0
    restored: OrderedTree[CountingKey] = OrderedTree.__new__(OrderedTree)
    restored.__setstate__(state)

    # reinserting one by one would take about n * n / 2 comparisons
    assert CountingKey.comparisons <= 2 * n
    assert restored.size() == n
    assert restored.height() == n
    assert [k.value for k in restored.inorder()] == list(range(n))


def test_snapshot_load_rebuilds_mixed_shape() -> None:
    keys = list(range(300))
    random.Random(7).shuffle(keys)
    tree = build_tree(keys)

    restored = pickle.loads(pickle.dumps(tree))

    assert list(restored.preorder()) == list(tree.preorder())
    assert list(restored.postorder()) == list(tree.postorder())
    assert restored.height() == tree.height()
    assert restored.size() == 300

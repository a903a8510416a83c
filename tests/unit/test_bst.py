"""Unit tests for the binary search tree."""

import logging

import pytest
from data_structures.components.bst import BinarySearchTree


def build(*values):
    bst = BinarySearchTree()
    for v in values:
        bst.insert(v)
    return bst


def assert_ordered(node):
    """Every left value <= node value < every right value, recursively."""
    if node is None:
        return []
    left = assert_ordered(node.left)
    right = assert_ordered(node.right)
    assert all(v <= node.value for v in left)
    assert all(v > node.value for v in right)
    return left + [node.value] + right


@pytest.fixture
def bst():
    """
            5
          /   \\
         2     7
        / \\   / \\
       1   3 6   12
    """
    return build(5, 2, 7, 1, 3, 6, 12)


def test_insert_places_values(bst):
    assert bst.root.value == 5
    assert bst.root.left.value == 2
    assert bst.root.right.value == 7
    assert bst.root.left.left.value == 1
    assert bst.root.right.right.value == 12
    assert bst.to_list() == [1, 2, 3, 5, 6, 7, 12]


def test_get_after_insert_on_empty():
    bst = build(4)
    assert bst.get(4).value == 4


def test_get(bst):
    assert bst.get(6).value == 6
    assert bst.get(12).value == 12
    assert bst.get(4) is None
    assert BinarySearchTree().get(1) is None


def test_duplicates_route_left():
    bst = build(5, 5, 5)
    assert bst.root.left.value == 5
    assert bst.root.left.left.value == 5
    assert bst.root.right is None


def test_get_continues_past_duplicate_chain():
    bst = build(5, 5, 5)
    assert bst.get(5) is bst.root.left.left


@pytest.mark.parametrize(
    "values",
    [
        [5, 2, 7, 1, 3, 6, 12],
        [1, 2, 3, 4, 5],
        [5, 4, 3, 2, 1],
        [3, 3, 1, 3, 2, 2, 5, 4, 3],
        ["m", "c", "x", "a", "c"],
    ],
)
def test_ordering_invariant(values):
    bst = build(*values)
    assert assert_ordered(bst.root) == sorted(values)


def test_remove_leaf(bst):
    removed = bst.remove(3)
    assert removed.value == 3
    assert bst.root.left.right is None
    assert bst.get(3) is None


def test_remove_inner_node_detaches_subtree(bst):
    removed = bst.remove(7)
    assert removed.value == 7
    assert removed.left.value == 6
    assert bst.root.right is None
    assert bst.to_list() == [1, 2, 3, 5]


def test_remove_not_found(bst):
    assert bst.remove(100) is None
    assert bst.remove(4) is None
    assert BinarySearchTree().remove(1) is None


def test_remove_root_discards_tree(bst, caplog):
    with caplog.at_level(logging.WARNING):
        removed = bst.remove(5)
    assert removed.value == 5
    assert bst.is_empty()
    assert "children are not re-linked" in caplog.text


def test_find_min_max_and_height(bst):
    assert bst.find_min() == 1
    assert bst.find_max() == 12
    assert bst.height() == 3
    assert BinarySearchTree().height() == 0
    assert BinarySearchTree().find_min() is None


def test_pretty_print():
    bst = build(2, 1, 3)
    assert bst.pretty_print() == "    3\n2\n    1"
    assert BinarySearchTree().pretty_print() == "<empty>"


def test_remove_all_is_idempotent(bst):
    assert bst.remove_all() is bst
    bst.remove_all()
    assert bst.is_empty()
    assert len(bst) == 0

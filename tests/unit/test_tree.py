"""Unit tests for the generic tree."""

import pytest
from data_structures.components.tree import Tree


@pytest.fixture
def tree():
    """
            3
         /  |  \\
        7   5   1
       / \\      |
      12  2      6
    """
    t = Tree()
    t.insert(3).insert(7).insert(5).insert(1)
    t.get(7).insert(12).insert(2)
    t.get(1).insert(6)
    return t


def test_insert_sets_root_then_children():
    t = Tree()
    t.insert(1)
    assert t.root.value == 1
    t.insert(2).insert(3)
    assert [c.value for c in t.root.children] == [2, 3]


def test_get_after_insert_on_empty():
    t = Tree().insert(9)
    assert t.get(9).value == 9


def test_node_insert_returns_node(tree):
    node = tree.get(5)
    assert node.insert(8) is node
    assert tree.get(8).value == 8


def test_level_order(tree):
    assert tree.level_order() == [3, 7, 5, 1, 12, 2, 6]


def test_get_not_found(tree):
    assert tree.get(99) is None
    assert Tree().get(1) is None


def test_get_shallowest_match_wins():
    t = Tree()
    t.insert("root").insert("a").insert("b")
    t.get("a").insert("x")
    t.get("b").insert("x")
    t.get("a").children[0].insert("y")

    found = t.get("x")
    assert found is t.get("a").children[0]


def test_remove_leaf(tree):
    removed = tree.remove(2)
    assert removed.value == 2
    assert [c.value for c in tree.get(7).children] == [12]


def test_remove_subtree(tree):
    removed = tree.remove(7)
    assert [c.value for c in removed.children] == [12, 2]
    assert tree.level_order() == [3, 5, 1, 6]


def test_remove_root_clears_tree(tree):
    assert tree.remove(3).value == 3
    assert tree.is_empty()


def test_remove_not_found(tree):
    assert tree.remove(42) is None
    assert Tree().remove(1) is None


def test_remove_all_is_idempotent(tree):
    tree.remove_all()
    tree.remove_all()
    assert tree.is_empty()
    assert tree.level_order() == []

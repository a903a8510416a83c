"""Unit tests for the singly-linked list."""

import pytest
from data_structures.components.linkedlist import SinglyLinkedList


class Item:
    def __init__(self, value: str):
        self.value = value

    def __str__(self) -> str:
        return self.value

    def __eq__(self, other) -> bool:
        return isinstance(other, Item) and self.value == other.value


@pytest.fixture
def ll():
    """List holding A -> B -> C."""
    _ll = SinglyLinkedList[str]()
    _ll.insert("C").insert("B").insert("A")
    return _ll


def test_insert_prepends():
    ll = SinglyLinkedList[Item]()
    assert len(ll) == 0

    ll.insert(Item("A"))
    ll.insert(Item("B"))
    assert len(ll) == 2
    assert str(ll) == "[Head] B -> A [Tail]"


def test_get_after_insert_on_empty():
    ll = SinglyLinkedList[int]()
    ll.insert(42)

    node = ll.get(42)
    assert node is not None
    assert node.value == 42


def test_get_not_found(ll):
    assert ll.get("Z") is None
    assert SinglyLinkedList().get(1) is None


def test_remove_head(ll):
    removed = ll.remove("A")
    assert removed is not None
    assert removed.value == "A"
    assert ll.to_list() == ["B", "C"]


def test_remove_middle(ll):
    removed = ll.remove("B")
    assert removed.value == "B"
    assert str(ll) == "[Head] A -> C [Tail]"


def test_remove_tail(ll):
    ll.remove("C")
    assert ll.to_list() == ["A", "B"]
    assert ll.head.next.next is None


def test_remove_not_found(ll):
    assert ll.remove("Z") is None
    assert ll.to_list() == ["A", "B", "C"]


def test_remove_from_empty_list():
    assert SinglyLinkedList().remove(1) is None


def test_remove_only_first_occurrence():
    ll = SinglyLinkedList[int]()
    ll.insert(1).insert(2).insert(1).insert(3)

    ll.remove(1)
    assert ll.to_list() == [3, 2, 1]


def test_remaining_multiset_after_mixed_operations():
    ll = SinglyLinkedList[int]()
    expected = []
    for v in [5, 3, 5, 8, 1, 3]:
        ll.insert(v)
        expected.insert(0, v)

    for v in [3, 8, 42, 5]:
        ll.remove(v)
        if v in expected:
            expected.remove(v)

    assert ll.to_list() == expected
    assert sorted(ll) == sorted(expected)


def test_remove_all_is_idempotent(ll):
    assert ll.remove_all() is ll
    assert ll.is_empty()
    ll.remove_all()
    assert ll.is_empty()
    assert str(ll) == ""

"""Unit tests for the binary min-heap."""

import random

import pytest
from data_structures.components.heap import BinaryMinHeap


def assert_heap_property(heap):
    items = heap.items
    for i in range(len(items)):
        for child in (2 * i + 1, 2 * i + 2):
            if child < len(items):
                assert items[i] <= items[child]


def test_scenario_peek_and_extract():
    heap = BinaryMinHeap()
    heap.insert(5).insert(3).insert(8).insert(1)

    assert heap.peek() == 1
    assert heap.extract_min() == 1
    assert heap.peek() == 3


def test_empty_heap():
    heap = BinaryMinHeap()
    assert heap.peek() is None
    assert heap.extract_min() is None
    assert heap.is_empty()


def test_single_item():
    heap = BinaryMinHeap().insert(7)
    assert heap.extract_min() == 7
    assert heap.is_empty()
    assert heap.extract_min() is None


@pytest.mark.parametrize(
    "values",
    [
        [5, 3, 8, 1],
        [1, 2, 3, 4, 5, 6, 7],
        [7, 6, 5, 4, 3, 2, 1],
        [4, 4, 1, 1, 9, 0, 4],
        [1.5, -2, 0, 12, 7.25],
        ["pear", "apple", "fig", "banana"],
    ],
)
def test_heap_property_and_sorted_extraction(values):
    heap = BinaryMinHeap()
    for v in values:
        heap.insert(v)
        assert_heap_property(heap)

    extracted = []
    while not heap.is_empty():
        extracted.append(heap.extract_min())
        assert_heap_property(heap)

    assert extracted == sorted(values)


def test_random_interleaving():
    rng = random.Random(1234)
    heap = BinaryMinHeap()
    shadow = []
    for _ in range(200):
        if shadow and rng.random() < 0.4:
            assert heap.extract_min() == min(shadow)
            shadow.remove(min(shadow))
        else:
            v = rng.randint(-50, 50)
            heap.insert(v)
            shadow.append(v)
        assert_heap_property(heap)
        assert len(heap) == len(shadow)


def test_items_is_a_copy():
    heap = BinaryMinHeap().insert(2).insert(1)
    heap.items.append(0)
    assert len(heap) == 2


def test_remove_all_is_idempotent():
    heap = BinaryMinHeap().insert(3)
    heap.remove_all().remove_all()
    assert heap.is_empty()
    assert heap.peek() is None

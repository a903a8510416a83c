"""
Binary min-heap.

A complete binary tree stored in a list, where every item is less than
or equal to its children, so the smallest item is always at index 0.
For the item at index i, the children are at 2i + 1 and 2i + 2 and the
parent is at (i - 1) // 2.

                  ┌───────┐
                  │   1   │
                  └─┬───┬─┘
           ┌────────┘   └────────┐
       ┌───┴───┐             ┌───┴───┐
       │   3   │             │   2   │
       └─┬───┬─┘             └─┬─────┘
     ┌───┘   └───┐         ┌───┘
 ┌───┴───┐   ┌───┴───┐ ┌───┴────┐
 │   7   │   │   5   │ │   12   │
 └───────┘   └───────┘ └────────┘

Time Complexity:
Insert/Extract: O(logn)
Peek: O(1)
"""

from __future__ import annotations

import logging
from typing import Generic, List, Optional

from ..core.types import C

logger = logging.getLogger(__name__)


def left_child_index(parent_index: int) -> int:
    return 2 * parent_index + 1


def right_child_index(parent_index: int) -> int:
    return 2 * parent_index + 2


def parent_index(child_index: int) -> int:
    return (child_index - 1) // 2


class BinaryMinHeap(Generic[C]):
    """
    BinaryMinHeap implements insert, peek, extract_min and remove_all.

    Invariants:
        - items[i] <= items[2i + 1] and items[i] <= items[2i + 2]
          whenever those children exist
    """

    def __init__(self) -> None:
        self._items: List[C] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BinaryMinHeap({self._items!r})"

    @property
    def items(self) -> List[C]:
        """A copy of the backing list, in heap order."""
        return list(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def _has_left_child(self, index: int) -> bool:
        return left_child_index(index) < len(self._items)

    def _has_right_child(self, index: int) -> bool:
        return right_child_index(index) < len(self._items)

    def _swap(self, i: int, j: int) -> None:
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def _sift_up(self) -> None:
        """Moves the last item up while it is smaller than its parent."""
        index = len(self._items) - 1
        while index > 0:
            parent = parent_index(index)
            if not self._items[index] < self._items[parent]:
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self) -> None:
        """Moves the first item down while it is greater than its smaller child."""
        index = 0
        while self._has_left_child(index):
            smaller = left_child_index(index)
            right = right_child_index(index)
            if self._has_right_child(index) and self._items[right] < self._items[smaller]:
                smaller = right

            if not self._items[index] > self._items[smaller]:
                break

            self._swap(index, smaller)
            index = smaller

    def insert(self, item: C) -> BinaryMinHeap[C]:
        """Appends item at the bottom of the heap, then sifts it up."""
        self._items.append(item)
        self._sift_up()
        return self

    def peek(self) -> Optional[C]:
        """Returns the smallest item without removing it, or None if empty."""
        if not self._items:
            return None
        return self._items[0]

    def extract_min(self) -> Optional[C]:
        """
        Removes and returns the smallest item, or None if empty.
        The last item takes the place of the root and is sifted down.
        """
        if not self._items:
            return None

        smallest = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down()

        logger.debug(f"Extracted {smallest!r}, {len(self._items)} item(s) left")
        return smallest

    def remove_all(self) -> BinaryMinHeap[C]:
        self._items = []
        return self

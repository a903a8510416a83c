"""Queue implementation.

A deque-backed container following the FIFO (first in, first out) rule.
Used by the breadth-first traversals in Tree and Graph.

Time Complexity:
Enqueue/Dequeue/Peek: O(1)
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Iterator, Optional

from ..core.types import T


class Queue(Generic[T]):
    """
    Queue implements enqueue, dequeue, peek, is_empty and remove_all.
    Items leave the queue in the order they were added.
    """

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def enqueue(self, value: T) -> Queue[T]:
        """Adds a new item to the back of the queue."""
        self._items.append(value)
        return self

    def dequeue(self) -> Optional[T]:
        """
        Removes the first-added item from the front of the queue.
        Returns None if the queue is empty.
        O(1) since deque pops from the left without shifting.
        """
        if not self._items:
            return None
        return self._items.popleft()

    def peek(self) -> Optional[T]:
        if not self._items:
            return None
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def remove_all(self) -> Queue[T]:
        self._items.clear()
        return self

"""Stack implementation.

A list-backed container following the LIFO (last in, first out) rule.

Time Complexity:
Push/Pop/Peek: O(1) (amortized for push)
"""

from __future__ import annotations

from typing import Generic, Optional

from ..core.types import T


class Stack(Generic[T]):
    """
    Stack implements push, pop, peek, is_empty and clear.
    The top of the stack is the end of the backing list.
    """

    def __init__(self) -> None:
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def push(self, value: T) -> Stack[T]:
        """Adds a new item to the top of the stack."""
        self._items.append(value)
        return self

    def pop(self) -> Optional[T]:
        """Removes and returns the most recently added item, or None if empty."""
        if not self._items:
            return None
        return self._items.pop()

    def peek(self) -> Optional[T]:
        """Returns the item at the top of the stack without removing it."""
        if not self._items:
            return None
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> Stack[T]:
        self._items = []
        return self

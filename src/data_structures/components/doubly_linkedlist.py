"""
A doubly-linked list: an unordered collection that can be traversed
both forwards and backwards.

Each node holds a value, the next node (owned) and a back-reference
to the previous node. The prev/next links of neighbours are kept
consistent after every mutation.

Time Complexity:
Insert: O(1), new nodes are prepended at the head
Search/Delete: O(n), the list must be scanned to find the element
"""

from __future__ import annotations

import logging
from typing import Generic, Iterator, Optional

from ..core.types import T

logger = logging.getLogger(__name__)


class DoublyLinkedListNode(Generic[T]):
    """A node holding a value and links to both of its neighbours."""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T) -> None:
        self.value: T = value
        self.prev: Optional[DoublyLinkedListNode[T]] = None
        self.next: Optional[DoublyLinkedListNode[T]] = None

    def __repr__(self) -> str:
        return f"DoublyLinkedListNode({self.value!r})"


class DoublyLinkedList(Generic[T]):
    """
    DoublyLinkedList implements insert, get, remove and remove_all,
    with the same contract as SinglyLinkedList.
    """

    def __init__(self) -> None:
        self.head: Optional[DoublyLinkedListNode[T]] = None

    def __repr__(self) -> str:
        if self.head is None:
            return ""
        return "[Head] " + " <-> ".join(str(v) for v in self) + " [Tail]"

    def __iter__(self) -> Iterator[T]:
        current = self.head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def is_empty(self) -> bool:
        return self.head is None

    def to_list(self) -> list[T]:
        return list(self)

    def tail(self) -> Optional[DoublyLinkedListNode[T]]:
        """Returns the last node of the list, O(n)."""
        current = self.head
        if current is None:
            return None
        while current.next is not None:
            current = current.next
        return current

    def reversed_values(self) -> list[T]:
        """Returns the values walking the prev links back from the tail."""
        values: list[T] = []
        current = self.tail()
        while current is not None:
            values.append(current.value)
            current = current.prev
        return values

    def insert(self, value: T) -> DoublyLinkedList[T]:
        """Inserts a new node at the head of the list. O(1)."""
        node = DoublyLinkedListNode(value)
        if self.head is not None:
            node.next = self.head
            self.head.prev = node
        self.head = node
        return self

    def get(self, value: T) -> Optional[DoublyLinkedListNode[T]]:
        """Returns the first node which contains value, or None. O(n)."""
        current = self.head
        while current is not None:
            if current.value == value:
                return current
            current = current.next
        return None

    def remove(self, value: T) -> Optional[DoublyLinkedListNode[T]]:
        """
        Removes the first node holding value and returns it,
        or None if no node matches. O(n).
        """
        node = self.get(value)
        if node is None:
            return None

        predecessor = node.prev
        successor = node.next

        if predecessor is None:
            # Removing the head
            self.head = successor
            if successor is not None:
                successor.prev = None
        elif successor is None:
            # Removing the tail
            predecessor.next = None
        else:
            predecessor.next = successor
            successor.prev = predecessor

        node.prev = None
        node.next = None
        logger.debug(f"Removed {value!r} from doubly-linked list")
        return node

    def remove_all(self) -> DoublyLinkedList[T]:
        self.head = None
        return self

"""
A singly-linked list: an unordered collection that can only be
traversed forwards, from the head towards the tail.

Time Complexity:
Insert: O(1), new nodes are prepended at the head
Search/Delete: O(n), the list must be scanned to find the element
"""

from __future__ import annotations  # allows forward-referencing without quotes

import logging
from typing import Generic, Iterator, Optional, Tuple

from ..core.types import T

logger = logging.getLogger(__name__)


class SinglyLinkedListNode(Generic[T]):
    """
    A node is a container which holds a value of type T
    and the next node it is linked to.
    """

    __slots__ = ("value", "next")

    def __init__(self, value: T, next: Optional[SinglyLinkedListNode[T]] = None) -> None:
        self.value: T = value
        self.next: Optional[SinglyLinkedListNode[T]] = next

    def __repr__(self) -> str:
        return f"SinglyLinkedListNode({self.value!r})"


class SinglyLinkedList(Generic[T]):
    """
    SinglyLinkedList implements the linked list data structure,
    using SinglyLinkedListNode containers holding values of type T.

    It implements insert, get, remove and remove_all.
    The head is the only entry point into the list.
    """

    def __init__(self) -> None:
        self.head: Optional[SinglyLinkedListNode[T]] = None

    def __repr__(self) -> str:
        if self.head is None:
            return ""
        return "[Head] " + " -> ".join(str(v) for v in self) + " [Tail]"

    def __iter__(self) -> Iterator[T]:
        current = self.head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        """Returns the number of elements in the linked list"""
        count = 0
        current = self.head
        while current is not None:
            count += 1
            current = current.next
        return count

    def is_empty(self) -> bool:
        return self.head is None

    def to_list(self) -> list[T]:
        """Returns the values from head to tail."""
        return list(self)

    def _find_with_predecessor(
        self, value: T
    ) -> Optional[Tuple[Optional[SinglyLinkedListNode[T]], SinglyLinkedListNode[T]]]:
        """
        Returns the first node holding value together with its predecessor
        (None for the head), or None when no node matches.
        Uses the "runner" technique: a trailing pointer follows the
        current one, so the predecessor is known when the match is found.
        """
        prior: Optional[SinglyLinkedListNode[T]] = None
        current = self.head
        while current is not None:
            if current.value == value:
                return prior, current
            prior = current
            current = current.next
        return None

    def insert(self, value: T) -> SinglyLinkedList[T]:
        """
        Inserts a new element at the head of the linked list.
        O(1) since no scanning is involved.
        """
        self.head = SinglyLinkedListNode(value, self.head)
        return self

    def get(self, value: T) -> Optional[SinglyLinkedListNode[T]]:
        """
        Returns the first node which contains the value specified.
        O(n), since in the worst case it must scan the entire list
        """
        current = self.head
        while current is not None:
            if current.value == value:
                return current
            current = current.next
        return None

    def remove(self, value: T) -> Optional[SinglyLinkedListNode[T]]:
        """
        Removes the first node holding value and returns it.
        Returns None if the value does not exist.
        O(n) since in the worst case the entire list must be
        scanned to find a match.
        """
        found = self._find_with_predecessor(value)
        if found is None:
            return None

        prior, current = found
        if prior is None:
            # Special case: removing the head
            self.head = current.next
        else:
            prior.next = current.next
        current.next = None
        logger.debug(f"Removed {value!r} from singly-linked list")
        return current

    def remove_all(self) -> SinglyLinkedList[T]:
        """Detaches the head, O(1). Unreachable nodes are garbage collected."""
        self.head = None
        return self

"""
Generic (N-ary) tree.

Each node has an ordered list of children and, except for the root,
exactly one parent. Lookups use a breadth-first search, so the
shallowest, leftmost match wins.

Time Complexity:
Insert: O(1)
Get/Remove: O(n), every node may have to be visited
"""

from __future__ import annotations

import logging
from typing import Generic, List, Optional

from ..core.types import T
from .queue import Queue

logger = logging.getLogger(__name__)


class TreeNode(Generic[T]):
    """A node holding a value and its children, in insertion order."""

    __slots__ = ("value", "children")

    def __init__(self, value: T) -> None:
        self.value = value
        self.children: List[TreeNode[T]] = []

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r})"

    def insert(self, value: T) -> TreeNode[T]:
        """
        Appends a new child holding value to this node and returns this
        node, so calls can be chained: `tree.get(7).insert(12).insert(2)`.
        """
        self.children.append(TreeNode(value))
        return self


class Tree(Generic[T]):
    """
    Tree implements insert (for the root and its immediate children),
    get, remove and remove_all. Deeper nodes are attached through
    TreeNode.insert.
    """

    def __init__(self) -> None:
        self.root: Optional[TreeNode[T]] = None

    def __repr__(self) -> str:
        return f"Tree({self.level_order()})"

    def is_empty(self) -> bool:
        return self.root is None

    def _get_parent_of(self, value: T) -> Optional[TreeNode[T]]:
        """
        Returns the parent of the first node holding value, or None if the
        value is absent or held by the root. Each node's children are
        compared before they are enqueued.
        """
        if self.root is None or self.root.value == value:
            return None

        queue: Queue[TreeNode[T]] = Queue()
        queue.enqueue(self.root)
        while not queue.is_empty():
            current = queue.dequeue()
            assert current is not None
            for child in current.children:
                if child.value == value:
                    return current
                queue.enqueue(child)
        return None

    def insert(self, value: T) -> Tree[T]:
        """Sets the root if the tree is empty, else appends a child to the root."""
        if self.root is None:
            self.root = TreeNode(value)
        else:
            self.root.insert(value)
        return self

    def get(self, value: T) -> Optional[TreeNode[T]]:
        """Returns the first node holding value in breadth-first order, or None."""
        if self.root is None:
            return None

        queue: Queue[TreeNode[T]] = Queue()
        queue.enqueue(self.root)
        while not queue.is_empty():
            current = queue.dequeue()
            assert current is not None
            if current.value == value:
                return current
            for child in current.children:
                queue.enqueue(child)
        return None

    def remove(self, value: T) -> Optional[TreeNode[T]]:
        """
        Detaches and returns the node holding value with its subtree.
        Removing the root value empties the tree.
        """
        if self.root is None:
            return None

        if self.root.value == value:
            removed = self.root
            self.root = None
            return removed

        parent = self._get_parent_of(value)
        if parent is None:
            return None

        for i, child in enumerate(parent.children):
            if child.value == value:
                logger.debug(f"Removed {value!r} from children of {parent.value!r}")
                return parent.children.pop(i)
        return None

    def remove_all(self) -> Tree[T]:
        self.root = None
        return self

    def level_order(self) -> List[T]:
        """Returns every value in breadth-first order."""
        values: List[T] = []
        if self.root is None:
            return values

        queue: Queue[TreeNode[T]] = Queue()
        queue.enqueue(self.root)
        while not queue.is_empty():
            current = queue.dequeue()
            assert current is not None
            values.append(current.value)
            for child in current.children:
                queue.enqueue(child)
        return values

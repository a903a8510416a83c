"""
Binary search tree.

Every value less than or equal to a node's value lives in that node's
left subtree, every greater value in its right subtree. Duplicates
therefore always route left. The tree is not rebalanced.

                  ┌───────┐
                  │   5   │
                  └─┬───┬─┘
           ┌────────┘   └────────┐
       ┌───┴───┐             ┌───┴───┐
       │   2   │             │   7   │
       └─┬───┬─┘             └─┬───┬─┘
     ┌───┘   └───┐         ┌───┘   └───┐
 ┌───┴───┐   ┌───┴───┐ ┌───┴───┐  ┌────┴───┐
 │   1   │   │   3   │ │   6   │  │   12   │
 └───────┘   └───────┘ └───────┘  └────────┘
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Generic, List, Optional, Tuple

from ..core.types import C

logger = logging.getLogger(__name__)


class Branch(Enum):
    LEFT = "left"
    RIGHT = "right"


class SlotCondition(Enum):
    """What the location search is looking for below a parent node."""

    EMPTY_SLOT = "empty_slot"
    VALUE_EQUALS = "value_equals"


# -----------------------------
# Binary Search Tree Node
# -----------------------------
class BinarySearchTreeNode(Generic[C]):
    """A node in a binary search tree owning its left and right subtrees."""

    __slots__ = ("value", "left", "right")

    def __init__(
        self,
        value: C,
        left: Optional[BinarySearchTreeNode[C]] = None,
        right: Optional[BinarySearchTreeNode[C]] = None,
    ) -> None:
        self.value = value
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"BinarySearchTreeNode({self.value!r})"

    def child(self, branch: Branch) -> Optional[BinarySearchTreeNode[C]]:
        return self.left if branch is Branch.LEFT else self.right

    def set_child(self, branch: Branch, node: Optional[BinarySearchTreeNode[C]]) -> None:
        if branch is Branch.LEFT:
            self.left = node
        else:
            self.right = node


# -----------------------------
# Binary Search Tree
# -----------------------------
class BinarySearchTree(Generic[C]):
    """
    BinarySearchTree implements insert, get, remove and remove_all.

    NOTE: removing the root value discards the whole tree, the root's
    children are not re-linked. Removing any other value detaches the
    matching node together with its subtree.
    """

    __slots__ = ("_root",)

    def __init__(self) -> None:
        self._root: Optional[BinarySearchTreeNode[C]] = None

    @property
    def root(self) -> Optional[BinarySearchTreeNode[C]]:
        return self._root

    def is_empty(self) -> bool:
        return self._root is None

    # -------------------------------
    # Location search
    # -------------------------------
    def _locate(
        self, value: C, condition: SlotCondition
    ) -> Optional[Tuple[BinarySearchTreeNode[C], Branch]]:
        """
        Descends from the root the way value would be inserted and returns
        the first (parent, branch) pair whose child satisfies condition:
        an empty slot, or a child holding value. Returns None otherwise.
        Time Complexity: O(h), h being the height of the tree
        """
        node = self._root
        while node is not None:
            branch = Branch.LEFT if value <= node.value else Branch.RIGHT
            child = node.child(branch)

            if condition is SlotCondition.EMPTY_SLOT and child is None:
                return node, branch
            if (
                condition is SlotCondition.VALUE_EQUALS
                and child is not None
                and child.value == value
            ):
                return node, branch

            node = child
        return None

    # -------------------------------
    # Insert / Get / Remove
    # -------------------------------
    def insert(self, value: C) -> BinarySearchTree[C]:
        """Insert a value into the first empty slot on its search path."""
        node = BinarySearchTreeNode(value)
        if self._root is None:
            self._root = node
            return self

        location = self._locate(value, SlotCondition.EMPTY_SLOT)
        # An empty slot is always reached on a finite tree
        assert location is not None
        parent, branch = location
        parent.set_child(branch, node)
        return self

    def get(self, value: C) -> Optional[BinarySearchTreeNode[C]]:
        """
        Returns the node holding value, or None.
        When duplicates are chained directly to the left, the search
        continues past them and returns the last one in the chain.
        Time Complexity: O(h)
        """
        node = self._root
        while node is not None:
            if value <= node.value:
                if value == node.value and (node.left is None or node.left.value != value):
                    return node
                node = node.left
            else:
                node = node.right
        return None

    def remove(self, value: C) -> Optional[BinarySearchTreeNode[C]]:
        """
        Detaches and returns the node holding value, along with its subtree.
        Returns None if the value is not in the tree.
        Time Complexity: O(h)
        """
        if self._root is None:
            return None

        if self._root.value == value:
            removed = self._root
            if removed.left is not None or removed.right is not None:
                logger.warning(
                    f"Removing root {value!r} discards its subtrees; children are not re-linked"
                )
            self._root = None
            return removed

        location = self._locate(value, SlotCondition.VALUE_EQUALS)
        if location is None:
            return None

        parent, branch = location
        removed = parent.child(branch)
        parent.set_child(branch, None)
        logger.debug(f"Detached subtree rooted at {value!r} from the {branch.value} of {parent.value!r}")
        return removed

    def remove_all(self) -> BinarySearchTree[C]:
        self._root = None
        return self

    # -------------------------------
    # Traversals
    # -------------------------------
    def inorder(self, visit: Callable[[C], None]) -> None:
        def _inorder(node: Optional[BinarySearchTreeNode[C]]):
            if node:
                _inorder(node.left)
                visit(node.value)
                _inorder(node.right)

        _inorder(self._root)

    # -------------------------------
    # Utility
    # -------------------------------
    def to_list(self) -> List[C]:
        """Return all values of the tree in sorted (inorder) order."""
        values: List[C] = []
        self.inorder(values.append)
        return values

    def __len__(self) -> int:
        return len(self.to_list())

    def height(self) -> int:
        """
        Returns the number of levels in the tree, 0 when empty.
        Time Complexity: O(n) since every node must be visited
        Space Complexity: O(h) for the recursion stack
        """

        def _height(node: Optional[BinarySearchTreeNode[C]]) -> int:
            if node is None:
                return 0
            return 1 + max(_height(node.left), _height(node.right))

        return _height(self._root)

    def find_min(self) -> Optional[C]:
        """Follows left branches to the smallest value. O(h)."""
        node = self._root
        if node is None:
            return None
        while node.left:
            node = node.left
        return node.value

    def find_max(self) -> Optional[C]:
        """Follows right branches to the largest value. O(h)."""
        node = self._root
        if node is None:
            return None
        while node.right:
            node = node.right
        return node.value

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.to_list()})"

    def pretty_print(self) -> str:
        """
        Renders the tree rotated a quarter turn counter-clockwise:
        the root is in the first column and right subtrees are printed above.
        """
        if not self._root:
            return "<empty>"

        lines: List[str] = []

        def _display(node: Optional[BinarySearchTreeNode[C]], depth: int) -> None:
            if node is None:
                return
            _display(node.right, depth + 1)
            lines.append("    " * depth + str(node.value))
            _display(node.left, depth + 1)

        _display(self._root, 0)
        return "\n".join(lines)

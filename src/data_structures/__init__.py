"""Data Structures - classic abstract data types implemented in Python."""

from .components import (
    BinaryMinHeap,
    BinarySearchTree,
    DoublyLinkedList,
    Graph,
    HashTable,
    Queue,
    SinglyLinkedList,
    Stack,
    Tree,
    Trie,
)
from .core.config import StructuresConfig, load_config
from .core.errors import (
    DataStructureError,
    InvalidArgumentError,
    InvariantViolationError,
    NotFoundError,
)

__all__ = [
    "BinaryMinHeap",
    "BinarySearchTree",
    "DoublyLinkedList",
    "Graph",
    "HashTable",
    "Queue",
    "SinglyLinkedList",
    "Stack",
    "Tree",
    "Trie",
    "StructuresConfig",
    "load_config",
    "DataStructureError",
    "InvalidArgumentError",
    "InvariantViolationError",
    "NotFoundError",
]

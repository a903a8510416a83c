"""Data structure implementations."""

from .bst import BinarySearchTree, BinarySearchTreeNode
from .doubly_linkedlist import DoublyLinkedList, DoublyLinkedListNode
from .graph import Graph, Vertex
from .hashtable import HashTable
from .heap import BinaryMinHeap
from .linkedlist import SinglyLinkedList, SinglyLinkedListNode
from .queue import Queue
from .stack import Stack
from .tree import Tree, TreeNode
from .trie import Trie, TrieNode

__all__ = [
    "BinarySearchTree",
    "BinarySearchTreeNode",
    "DoublyLinkedList",
    "DoublyLinkedListNode",
    "Graph",
    "Vertex",
    "HashTable",
    "BinaryMinHeap",
    "SinglyLinkedList",
    "SinglyLinkedListNode",
    "Queue",
    "Stack",
    "Tree",
    "TreeNode",
    "Trie",
    "TrieNode",
]

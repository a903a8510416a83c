"""Unit tests for the Stack and Queue collaborators."""

from data_structures.components.queue import Queue
from data_structures.components.stack import Stack
from data_structures.interfaces import FIFOQueue, LIFOStack


def test_stack_is_lifo():
    stack = Stack()
    stack.push(1).push(2).push(3)

    assert stack.peek() == 3
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.pop() is None
    assert stack.peek() is None
    assert stack.is_empty()


def test_stack_clear():
    stack = Stack().push("a").push("b")
    assert len(stack) == 2
    stack.clear().clear()
    assert stack.is_empty()


def test_queue_is_fifo():
    queue = Queue()
    queue.enqueue(1).enqueue(2).enqueue(3)

    assert queue.peek() == 1
    assert [queue.dequeue(), queue.dequeue(), queue.dequeue()] == [1, 2, 3]
    assert queue.dequeue() is None
    assert queue.peek() is None
    assert queue.is_empty()


def test_queue_remove_all():
    queue = Queue().enqueue(1).enqueue(2)
    assert list(queue) == [1, 2]
    queue.remove_all().remove_all()
    assert len(queue) == 0


def test_sequences_satisfy_protocols():
    assert isinstance(Queue(), FIFOQueue)
    assert isinstance(Stack(), LIFOStack)
    assert not isinstance(Stack(), FIFOQueue)


def test_node_collections_share_shape():
    from data_structures.components import (
        BinarySearchTree,
        DoublyLinkedList,
        SinglyLinkedList,
        Tree,
    )
    from data_structures.interfaces import Collection

    for cls in (SinglyLinkedList, DoublyLinkedList, BinarySearchTree, Tree):
        assert isinstance(cls(), Collection)
    assert not isinstance(Queue(), Collection)

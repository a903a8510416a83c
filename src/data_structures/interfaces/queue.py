"""Protocol definition for a FIFO queue."""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class FIFOQueue(Protocol):
    """First in, first out container used by breadth-first traversals."""

    def enqueue(self, value: Any) -> FIFOQueue:
        """Add value to the back of the queue."""
        ...

    def dequeue(self) -> Optional[Any]:
        """Remove and return the front value, or None when empty."""
        ...

    def peek(self) -> Optional[Any]:
        """Return the front value without removing it, or None."""
        ...

    def is_empty(self) -> bool:
        ...

"""Protocol definition for a LIFO stack."""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class LIFOStack(Protocol):
    """Last in, first out container."""

    def push(self, value: Any) -> LIFOStack:
        """Add value to the top of the stack."""
        ...

    def pop(self) -> Optional[Any]:
        """Remove and return the top value, or None when empty."""
        ...

    def peek(self) -> Optional[Any]:
        """Return the top value without removing it, or None."""
        ...

    def is_empty(self) -> bool:
        ...

"""Protocol definition for the node-based collections."""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class Collection(Protocol):
    """Common shape of the lists and trees: insert, get, remove, remove_all.

    This is a convention, the components do not inherit from it.
    """

    def insert(self, value: Any) -> Collection:
        """Add value and return the collection for chaining."""
        ...

    def get(self, value: Any) -> Optional[Any]:
        """Return the node holding value, or None."""
        ...

    def remove(self, value: Any) -> Optional[Any]:
        """Detach and return the node holding value, or None."""
        ...

    def remove_all(self) -> Collection:
        """Drop every node and return the now empty collection."""
        ...

"""Common type definitions shared by the components."""

from __future__ import annotations

from typing import Any, Hashable, Protocol, TypeVar


# NOTE: the Comparable class is used to specify that the values stored in the
# ordered structures (BST, heap) support comparison operations.
# Mixing values of incomparable types in one structure is undefined.
class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...
    def __le__(self, other: Any) -> bool: ...
    def __gt__(self, other: Any) -> bool: ...
    def __ge__(self, other: Any) -> bool: ...
    def __eq__(self, other: object) -> bool: ...


T = TypeVar("T")
C = TypeVar("C", bound=Comparable)
H = TypeVar("H", bound=Hashable)

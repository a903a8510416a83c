"""Exception hierarchy for the data structures package.

Searches on lists and trees report a missing value by returning None.
The exceptions below signal misuse or a broken structural contract.
"""

from __future__ import annotations


class DataStructureError(Exception):
    """Base exception for all data structure errors."""
    pass


class NotFoundError(DataStructureError, LookupError):
    """Raised when a required vertex, word or child node is absent."""
    pass


class InvalidArgumentError(DataStructureError, ValueError):
    """Raised when an argument has an unsupported type or value."""
    pass


class InvariantViolationError(DataStructureError):
    """Raised when an operation would corrupt a structure's shape."""
    pass

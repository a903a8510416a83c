"""
Helper functions used by the hash table.

Each helper validates its input type up front and raises
InvalidArgumentError before doing any work.
"""

from __future__ import annotations

from typing import Any, Sequence

from .core.errors import InvalidArgumentError


def linear_search(seq: Sequence[Any], target: Any) -> int | None:
    """
    Performs a linear search on the input list.
    Returns the index of the target if found,
    otherwise returns None.
    """
    if not isinstance(seq, (list, tuple)):
        raise InvalidArgumentError(
            f"Type {type(seq).__name__} of value {seq!r} is not supported. Provide a list or tuple."
        )

    # We must iterate through the entire list, so this operation is O(n)
    for i in range(len(seq)):
        if seq[i] == target:
            return i
    return None


def sum_digits(value: int | float) -> int:
    """
    Calculates the sum of all decimal digits of the given number.
    Floats are truncated toward zero and the sign is ignored.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(
            f"Type {type(value).__name__} of value {value!r} is not supported. Provide a number."
        )

    remaining = abs(int(value))
    total = 0
    while remaining:
        remaining, digit = divmod(remaining, 10)
        total += digit
    return total


def get_unicode_representation(text: str) -> str:
    """
    Concatenates the decimal code point of every character in text,
    e.g. "ab" -> "9798".
    """
    if not isinstance(text, str):
        raise InvalidArgumentError(
            f"Type {type(text).__name__} of value {text!r} is not supported. Provide a string."
        )

    return "".join(str(ord(ch)) for ch in text)

"""Hash table implementation.

Values are grouped into a fixed number of buckets by a hash function.
Values whose hash codes land on the same bucket (a collision) are chained
sequentially inside that bucket, which degrades lookups toward O(n).

Time Complexity:
Set/Get/Remove: O(1) on average, O(n) when every value collides
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Tuple

from ..core.errors import InvalidArgumentError
from ..utils import get_unicode_representation, linear_search, sum_digits

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 128

HashFunction = Callable[[Any], int]


class HashTable:
    """Separate-chaining hash table over a fixed bucket array.

    Args:
        capacity: Number of buckets
        hash_function: Optional callable mapping a value to an int hash code.
            Defaults to a digit-sum hash supporting numbers and strings.

    Invariants:
        - A value is always stored in bucket hash(value) % capacity
        - Duplicate values are kept, in insertion order within a bucket
    """

    def __init__(
        self, capacity: int = DEFAULT_CAPACITY, hash_function: Optional[HashFunction] = None
    ) -> None:
        if capacity <= 0:
            raise InvalidArgumentError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.hash_function = hash_function
        self._buckets: list[list[Any]] = [[] for _ in range(capacity)]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, value: Any) -> bool:
        return self.get(value) is not None

    def __repr__(self) -> str:
        filled = {i: bucket for i, bucket in enumerate(self._buckets) if bucket}
        return f"HashTable(capacity={self.capacity}, buckets={filled!r})"

    @staticmethod
    def _simple_hash(value: Any) -> int:
        """
        Numbers hash to the sum of their digits. Strings hash to the
        digit sum of their concatenated code points.
        """
        if isinstance(value, str):
            representation = get_unicode_representation(value)
            # int() rejects digit strings longer than sys.get_int_max_str_digits()
            return sum(int(digit) for digit in representation)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidArgumentError(
                f"Type {type(value).__name__} of value {value!r} is not supported. "
                "Provide a number or a string."
            )
        return sum_digits(value)

    def _bucket_index(self, value: Any) -> int:
        if self.hash_function is not None:
            hash_code = self.hash_function(value)
        else:
            hash_code = self._simple_hash(value)
        return hash_code % self.capacity

    def set(self, value: Any) -> HashTable:
        """Stores value in its bucket, chaining on collision."""
        index = self._bucket_index(value)
        bucket = self._buckets[index]
        if bucket:
            logger.debug(f"Collision in bucket {index} for {value!r}")
        bucket.append(value)
        return self

    def get(self, value: Any) -> Optional[Tuple[int, int]]:
        """
        Returns (bucket_index, index_within_bucket) of the first
        occurrence of value, or None if it is not stored.
        """
        index = self._bucket_index(value)
        bucket = self._buckets[index]
        if not bucket:
            return None

        position = linear_search(bucket, value)
        if position is None:
            return None
        return index, position

    def remove(self, value: Any) -> Optional[Any]:
        """Removes and returns the first occurrence of value, or None."""
        location = self.get(value)
        if location is None:
            return None

        index, position = location
        del self._buckets[index][position]
        return value

    def remove_all(self) -> HashTable:
        self._buckets = [[] for _ in range(self.capacity)]
        return self

"""
OrderedSymbolTable abstract base class for sorted key-value maps.
"""

from abc import abstractmethod
from typing import Any

from llrb.interfaces.range_iterable import RangeIterable


class OrderedSymbolTable(RangeIterable):
    """
    Abstract base class for symbol tables whose keys are totally ordered.

    Conventions:
    - Keys are never None and must be mutually comparable.
    - Values are never None; put(key, None) removes key.
    - get() returns None for a missing key, so a miss never looks like a
      stored value.

    Implementations are not thread safe. Callers that share a table between
    threads or tasks must serialize every call, reads included.

    Implementations:
    - LeftLeaningRedBlackTree: O(log N) worst case for every keyed operation
    """

    @abstractmethod
    def put(self, key: Any, value: Any) -> None:
        """
        Insert or update a key-value pair.

        Args:
            key: The key to insert/update.
            value: The value to associate with the key. None deletes the key.

        Time complexity: O(log N)
        """

    @abstractmethod
    def get(self, key: Any) -> Any | None:
        """
        Retrieve the value for a given key.

        Returns:
            The value if found, None otherwise.

        Time complexity: O(log N)
        """

    @abstractmethod
    def delete(self, key: Any) -> bool:
        """
        Remove a key-value pair.

        Returns:
            True if the key was found and removed, False otherwise.

        Time complexity: O(log N)
        """

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Time complexity: O(log N)
        """

    @abstractmethod
    def is_empty(self) -> bool:
        pass

    @abstractmethod
    def size(self, lo: Any | None = None, hi: Any | None = None) -> int:
        """
        Count keys, either all of them or those in [lo, hi].

        Args:
            lo: Lower bound (inclusive). None means unbounded.
            hi: Upper bound (inclusive). None means unbounded.

        Time complexity: O(1) for the whole table, O(log N) for a range
        """

    @abstractmethod
    def keys(self, lo: Any | None = None, hi: Any | None = None) -> list[Any]:
        """
        Return the keys in [lo, hi] in ascending order.

        Args:
            lo: Lower bound (inclusive). None means unbounded.
            hi: Upper bound (inclusive). None means unbounded.

        Time complexity: O(log N + M) for M returned keys
        """

    @abstractmethod
    def min(self) -> Any:
        """
        Return the smallest key.

        Raises:
            EmptyTreeError: If the table is empty.
        """

    @abstractmethod
    def max(self) -> Any:
        """
        Return the largest key.

        Raises:
            EmptyTreeError: If the table is empty.
        """

    @abstractmethod
    def delete_min(self) -> tuple[Any, Any]:
        """
        Remove the smallest key.

        Returns:
            The removed (key, value) pair.

        Raises:
            EmptyTreeError: If the table is empty.
        """

    @abstractmethod
    def delete_max(self) -> tuple[Any, Any]:
        """
        Remove the largest key.

        Returns:
            The removed (key, value) pair.

        Raises:
            EmptyTreeError: If the table is empty.
        """

    @abstractmethod
    def floor(self, key: Any) -> Any | None:
        """Return the largest key <= key, or None if there is none."""

    @abstractmethod
    def ceiling(self, key: Any) -> Any | None:
        """Return the smallest key >= key, or None if there is none."""

    @abstractmethod
    def rank(self, key: Any) -> int:
        """
        Return the number of keys strictly less than key.

        key does not have to be present in the table.
        """

    @abstractmethod
    def select(self, k: int) -> Any:
        """
        Return the key of rank k (0-indexed).

        Raises:
            InvalidArgumentError: If k is not in [0, size()).
        """

"""
RangeIterable protocol for containers that can be walked in key order.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class RangeIterable(ABC):
    """
    Protocol for data structures that support in-order iteration over a key range.

    Implementations must support:
    - Full iteration via __iter__
    - Range-bounded iteration via iterator(start, end)
    - Async iteration via __aiter__
    - Async range-bounded iteration via async_iterator(start, end)

    Iterators read the live structure. Mutating the container while an
    iterator is open gives undefined results.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Return an iterator over all key-value pairs in sorted order."""

    @abstractmethod
    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        """
        Return an iterator over key-value pairs in the specified range.

        Args:
            start: Start key (inclusive). If None, starts from the smallest key.
            end: End key (exclusive). If None, iterates to the largest key.

        Returns:
            Iterator yielding (key, value) tuples in ascending key order.
        """

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        """Return an async iterator over all key-value pairs in sorted order."""

    @abstractmethod
    def async_iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> AsyncIterator[tuple[Any, Any]]:
        """
        Return an async iterator over key-value pairs in the specified range.

        Args:
            start: Start key (inclusive). If None, starts from the smallest key.
            end: End key (exclusive). If None, iterates to the largest key.

        Returns:
            AsyncIterator yielding (key, value) tuples in ascending key order.
        """

"""
Ordered symbol table backed by a left-leaning red-black tree.

This package provides a sorted key-value map with O(log N) worst case for:
- put(key, value) / get(key) / delete(key)
- min() / max() / delete_min() / delete_max()
- floor(key) / ceiling(key)
- rank(key) / select(k) - order statistics
- size(lo, hi) / keys(lo, hi) - range counts and range listings
"""

from llrb.interfaces import OrderedSymbolTable, RangeIterable
from llrb.models.exceptions import (
    EmptyTreeError,
    InvalidArgumentError,
    InvariantViolationError,
    OrderedTableError,
)
from llrb.models.sortedcontainers import LeftLeaningRedBlackTree

__all__ = [
    "EmptyTreeError",
    "InvalidArgumentError",
    "InvariantViolationError",
    "LeftLeaningRedBlackTree",
    "OrderedSymbolTable",
    "OrderedTableError",
    "RangeIterable",
]

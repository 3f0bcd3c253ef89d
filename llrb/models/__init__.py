"""
Data models for the ordered symbol table.
"""

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
    "OrderedTableError",
    "LeftLeaningRedBlackTree",
]

"""
Custom exceptions for the ordered symbol table.
"""

from typing import Any


class OrderedTableError(Exception):
    """Base class for all symbol table errors."""


class EmptyTreeError(OrderedTableError, LookupError):
    """
    Raised when an operation that needs at least one key runs on an empty table.

    Absence of a single key is never reported this way; get(), floor() and
    ceiling() return None instead.
    """

    def __init__(self, operation: str):
        """
        Initialize empty tree error.

        Args:
            operation: Name of the operation that was attempted.
        """
        self.operation = operation
        super().__init__(f"{operation}() called on an empty symbol table")


class InvalidArgumentError(OrderedTableError, ValueError):
    """Raised when a caller passes an argument the table cannot accept."""

    def __init__(self, argument: str, value: Any, reason: str):
        """
        Initialize invalid argument error.

        Args:
            argument: Name of the offending parameter.
            value: The rejected value.
            reason: Human readable explanation.
        """
        self.argument = argument
        self.value = value
        self.reason = reason
        super().__init__(f"invalid {argument}={value!r}: {reason}")


class InvariantViolationError(OrderedTableError, AssertionError):
    """
    Raised when write validation is enabled and a mutation leaves the tree
    in a state that breaks one of its structural invariants.

    This indicates a bug in the balancing code, not a caller error.
    """

    def __init__(self, operation: str, violations: list[str]):
        self.operation = operation
        self.violations = list(violations)
        super().__init__(
            f"tree invariants broken after {operation}(): {', '.join(self.violations)}"
        )

"""
Shared pytest fixtures for ordered symbol table tests.
"""

import pytest

from llrb.models.sortedcontainers import LeftLeaningRedBlackTree

SEARCH_EXAMPLE = "SEARCHEXAMPLE"


@pytest.fixture
def tree():
    """Provide an empty tree that re-validates itself after every write."""
    return LeftLeaningRedBlackTree(validate_writes=True)


@pytest.fixture
def example_tree():
    """Provide the S E A R C H E X A M P L E table, values 0..12 in insertion order."""
    table = LeftLeaningRedBlackTree(validate_writes=True)
    for i, letter in enumerate(SEARCH_EXAMPLE):
        table.put(letter, i)
    return table


@pytest.fixture
def ascending_tree():
    """Provide keys 1..7 inserted in ascending order (yields a perfect tree)."""
    table = LeftLeaningRedBlackTree(validate_writes=True)
    for i in range(1, 8):
        table.put(i, f"value{i}")
    return table

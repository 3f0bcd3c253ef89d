"""
Sorted container implementations for the ordered symbol table.
"""

from llrb.models.sortedcontainers.left_leaning_red_black_tree import LeftLeaningRedBlackTree

__all__ = ["LeftLeaningRedBlackTree"]

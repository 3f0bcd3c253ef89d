"""
Abstract base classes for the ordered symbol table.
"""

from llrb.interfaces.ordered_symbol_table import OrderedSymbolTable
from llrb.interfaces.range_iterable import RangeIterable

__all__ = ["OrderedSymbolTable", "RangeIterable"]

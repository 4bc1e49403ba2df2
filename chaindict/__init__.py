"""
chain-dict: In-Memory Chained Hash Table

A string -> string dictionary backed by a fixed-size hash table that
resolves collisions with singly linked bucket chains.
"""

from .exceptions import AllocationError, ChainDictError
from .table.dictionary import Dictionary, make_dictionary, print_dictionary

__version__ = "1.0.0"

__all__ = [
    "AllocationError",
    "ChainDictError",
    "Dictionary",
    "make_dictionary",
    "print_dictionary",
]

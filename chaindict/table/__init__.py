"""Hash table module for chain-dict."""

from .chain import Chain, Entry
from .dictionary import Dictionary, make_dictionary, print_dictionary
from .hashing import HASH_MULTIPLIER, hash_key, string_hash

__all__ = [
    "Chain",
    "Dictionary",
    "Entry",
    "HASH_MULTIPLIER",
    "hash_key",
    "make_dictionary",
    "print_dictionary",
    "string_hash",
]

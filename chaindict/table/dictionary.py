"""
Dictionary Module

This module implements the chained hash table that backs the store.

The table is a fixed-length list of bucket chains. Every operation hashes
the key once, indexes into the table, and hands the rest of the work to
the chain in that bucket. The table never grows; chains simply get longer
as the load factor rises.
"""

import logging
import sys
from typing import Any, Dict, List, Optional, TextIO

from ..config.settings import settings
from ..exceptions import AllocationError
from .chain import Chain
from .hashing import hash_key

logger = logging.getLogger(__name__)


def _require_str(name: str, obj: Any) -> None:
    if not isinstance(obj, str):
        raise TypeError(f"{name} must be str, not {type(obj).__name__}")


class Dictionary:
    """
    In-memory string -> string dictionary using separate chaining.

    Operations:
    - get: Look up the value for a key (None if absent)
    - put: Insert a key or update its value
    - replace: Update the value of a key only if it is present
    - clear: Release every entry, returning to the just-built state
    - dump: Human-readable listing of the buckets (debugging aid)

    Keys are unique across the whole table, not just within a bucket.
    A key's bucket depends only on the key and the table size, so it
    never moves for the lifetime of its entry.

    Not thread-safe: callers sharing an instance must serialize access.

    Attributes:
        table_size: Number of buckets (fixed for the lifetime of the table)
    """

    def __init__(self, table_size: int = None):
        """
        Build an empty dictionary.

        Args:
            table_size: Number of buckets (default from settings.TABLE_SIZE)

        Raises:
            ValueError: If table_size is not positive
            AllocationError: If the bucket array can't be allocated
        """
        self.table_size = table_size if table_size is not None else settings.TABLE_SIZE
        if self.table_size <= 0:
            raise ValueError("table_size must be positive")

        try:
            self._buckets: List[Chain] = [Chain() for _ in range(self.table_size)]
        except MemoryError as exc:
            raise AllocationError(
                f"could not allocate a table of {self.table_size} buckets"
            ) from exc

    def bucket_index(self, key: str) -> int:
        """Get the index of the bucket that owns key."""
        return hash_key(key, self.table_size)

    def _chain_for(self, key: str) -> Chain:
        return self._buckets[self.bucket_index(key)]

    def get(self, key: str) -> Optional[str]:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up

        Returns:
            The stored value, or None if the key is not present

        Time Complexity: O(1 + chain length)
        """
        entry = self._chain_for(key).search(key)
        if entry is None:
            return None
        return entry.value

    def put(self, key: str, value: str) -> None:
        """
        Insert or update a key-value pair.

        New keys get a fresh entry at the front of their bucket's chain.
        Existing keys keep their entry and chain position; only the value
        is swapped.

        Raises:
            TypeError: If key or value is not a string
            AllocationError: If a new entry can't be allocated; the
                dictionary is left unchanged
        """
        _require_str("key", key)
        _require_str("value", value)

        index = self.bucket_index(key)
        created = self._buckets[index].store(key, value)
        if created:
            logger.debug(f"Inserted {key!r} into bucket {index}")
        else:
            logger.debug(f"Updated {key!r} in bucket {index}")

    def replace(self, key: str, value: str) -> bool:
        """
        Replace the value of a key only if it is already present.

        The passed value object is stored directly rather than copied.
        After a successful call the dictionary owns it; callers should
        not treat it as theirs any more.

        Args:
            key: The key whose value to replace
            value: The new value

        Returns:
            True if the key was present and its value replaced, False if
            the key is absent (nothing is allocated or changed)
        """
        _require_str("key", key)
        _require_str("value", value)

        replaced = self._chain_for(key).replace(key, value)
        logger.debug(f"Replace {key!r}: {'done' if replaced else 'key not found'}")
        return replaced

    def clear(self) -> None:
        """
        Remove every entry from every bucket.

        Each chain is released in full, not only its head, and the table
        ends up identical to a freshly constructed one.
        """
        released = sum(chain.release() for chain in self._buckets)
        logger.debug(f"Cleared {released} entries")

    def dump(self, full: bool = False) -> str:
        """
        Produce a human-readable listing of the buckets.

        Format (one line per bucket):
            0: key: value
            1: NULL
            ...

        Only the first entry of each chain is shown unless full is True,
        in which case each line lists the whole chain front to back:
            0: key_0: value_0, key_1: value_1, ...

        Returns:
            The listing, lines separated by newlines
        """
        lines = []
        for index, chain in enumerate(self._buckets):
            if chain.is_empty():
                lines.append(f"{index}: NULL")
            elif full:
                pairs = ", ".join(f"{entry.key}: {entry.value}" for entry in chain)
                lines.append(f"{index}: {pairs}")
            else:
                lines.append(f"{index}: {chain.head.key}: {chain.head.value}")
        return "\n".join(lines)

    def exists(self, key: str) -> bool:
        """Check if a key is present."""
        return self._chain_for(key).search(key) is not None

    def size(self) -> int:
        """Get the number of entries in the dictionary."""
        return sum(len(chain) for chain in self._buckets)

    def keys(self) -> List[str]:
        """
        Get all keys.

        Keys come out bucket by bucket, each bucket front to back. No
        other ordering is promised.
        """
        return [entry.key for chain in self._buckets for entry in chain]

    def chain_lengths(self) -> List[int]:
        """Get the length of every bucket's chain, indexed by bucket."""
        return [len(chain) for chain in self._buckets]

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the table.

        Returns:
            Dictionary containing:
            - total_keys: Number of entries
            - table_size: Number of buckets
            - load_factor: total_keys / table_size
            - empty_buckets: Buckets with no entries
            - longest_chain: Length of the longest chain
        """
        lengths = self.chain_lengths()
        total = sum(lengths)
        return {
            "total_keys": total,
            "table_size": self.table_size,
            "load_factor": total / self.table_size,
            "empty_buckets": lengths.count(0),
            "longest_chain": max(lengths),
        }

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.exists(key)

    def __repr__(self) -> str:
        return f"Dictionary(table_size={self.table_size}, total_keys={self.size()})"


def make_dictionary(table_size: int = None) -> Dictionary:
    """Create an empty dictionary (default size from settings.TABLE_SIZE)."""
    return Dictionary(table_size=table_size)


def print_dictionary(dictionary: Dictionary, file: TextIO = None) -> None:
    """
    Print the bucket listing of a dictionary.

    Args:
        dictionary: The dictionary to print
        file: Stream to write to (default sys.stdout)
    """
    print(dictionary.dump(), file=file if file is not None else sys.stdout)

"""
Bucket Chain Module

Each bucket of the dictionary owns one Chain: a singly linked list of
Entry nodes holding the key/value pairs whose keys hash to that bucket.

Chain Layout:
- New entries are linked in at the FRONT (most recently inserted first)
- An existing entry keeps its position when its value changes
- release() unlinks every node, leaving the chain empty

Chain operations are the only place entries are created, changed or
released. The Dictionary only picks the chain and delegates.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from ..exceptions import AllocationError


@dataclass(eq=False)
class Entry:
    """
    One key/value pair plus the link to the next entry of its chain.

    Attributes:
        key: The entry's key (its identity within the dictionary)
        value: The value associated with the key
        next: The following entry in the chain, or None at the tail
    """
    key: str
    value: str
    next: Optional["Entry"] = None


class Chain:
    """
    Singly linked list of entries owned by one bucket.

    Lookups are a linear scan comparing keys for equality, so every
    operation costs O(1 + chain length).

    Attributes:
        head: First entry of the chain, or None if the bucket is empty
    """

    def __init__(self):
        self.head: Optional[Entry] = None

    def search(self, key: str) -> Optional[Entry]:
        """
        Find the entry holding key.

        Args:
            key: The key to look for

        Returns:
            The matching Entry, or None if the key is not in this chain
        """
        entry = self.head
        while entry is not None:
            if entry.key == key:
                return entry
            entry = entry.next
        return None

    def insert_front(self, key: str, value: str) -> Entry:
        """
        Create a new entry and link it in at the front of the chain.

        The caller is responsible for making sure key is not already
        present.

        Raises:
            AllocationError: If the entry can't be allocated; the chain
                is left unchanged
        """
        try:
            entry = Entry(key, value, self.head)
        except MemoryError as exc:
            raise AllocationError(f"could not allocate entry for key {key!r}") from exc
        self.head = entry
        return entry

    def store(self, key: str, value: str) -> bool:
        """
        Insert a new entry or update the value of an existing one.

        Args:
            key: The key to store
            value: The value to associate with the key

        Returns:
            True if a new entry was created, False if an existing entry
            was updated in place
        """
        entry = self.search(key)
        if entry is None:
            self.insert_front(key, value)
            return True

        entry.value = value
        return False

    def replace(self, key: str, value: str) -> bool:
        """
        Overwrite the value of an existing entry.

        The value object is stored as passed in; no copy is taken.

        Returns:
            True if the key was present and updated, False otherwise
            (the chain is left untouched)
        """
        entry = self.search(key)
        if entry is None:
            return False

        entry.value = value
        return True

    def release(self) -> int:
        """
        Release every entry of the chain.

        Walks the whole chain unlinking each node, so no entry stays
        reachable from another one after the call.

        Returns:
            Number of entries released
        """
        released = 0
        entry = self.head
        self.head = None
        while entry is not None:
            following = entry.next
            entry.next = None
            entry = following
            released += 1
        return released

    def is_empty(self) -> bool:
        """Check if the chain holds no entries."""
        return self.head is None

    def __iter__(self) -> Iterator[Entry]:
        entry = self.head
        while entry is not None:
            yield entry
            entry = entry.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return "Chain([" + ", ".join(f"{e.key!r}: {e.value!r}" for e in self) + "])"

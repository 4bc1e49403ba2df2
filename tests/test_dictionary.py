"""
Tests for the chained hash table Dictionary

These tests verify the Dictionary operations:
- get(): look up a value by key
- put(): insert or update key-value pairs
- replace(): update only keys that are present
- clear(): release every entry
- dump(): bucket listing

Run with: python -m pytest tests/test_dictionary.py -v
"""

import io
import logging

import pytest

from chaindict import make_dictionary, print_dictionary
from chaindict.exceptions import AllocationError, ChainDictError
from chaindict.table import chain as chain_module
from chaindict.table import dictionary as dictionary_module
from chaindict.table.dictionary import Dictionary
from tests.conftest import COLLIDING_KEYS


class TestDictionaryConstruction:
    """Test construction."""

    def test_default_table_size(self):
        """Test the default table has 11 buckets."""
        assert make_dictionary().table_size == 11

    def test_new_dictionary_is_empty(self, dictionary: Dictionary):
        """Test every bucket starts empty."""
        assert dictionary.size() == 0
        assert dictionary.chain_lengths() == [0] * 11

    def test_invalid_table_size(self):
        """Test non-positive table sizes raise ValueError."""
        with pytest.raises(ValueError):
            Dictionary(table_size=0)
        with pytest.raises(ValueError):
            Dictionary(table_size=-1)

    def test_allocation_failure(self, monkeypatch):
        """Test MemoryError while building the table raises AllocationError."""
        def failing_chain():
            raise MemoryError()

        monkeypatch.setattr(dictionary_module, "Chain", failing_chain)

        with pytest.raises(AllocationError) as exc_info:
            Dictionary(table_size=11)
        assert isinstance(exc_info.value, MemoryError)
        assert isinstance(exc_info.value, ChainDictError)


class TestDictionaryGetPut:
    """Test get() and put() methods."""

    def test_put_then_get(self, dictionary: Dictionary):
        """Test put("a","1"); put("b","2") then both are retrievable."""
        dictionary.put("a", "1")
        dictionary.put("b", "2")

        assert dictionary.get("a") == "1"
        assert dictionary.get("b") == "2"

    def test_put_returns_none(self, dictionary: Dictionary):
        """Test put has no return value."""
        assert dictionary.put("a", "1") is None

    def test_put_update_existing_key(self, dictionary: Dictionary):
        """Test put("a","1"); put("a","3") leaves a single entry for a."""
        dictionary.put("a", "1")
        dictionary.put("a", "3")

        assert dictionary.get("a") == "3"
        assert dictionary.size() == 1

    def test_get_empty_dictionary(self, dictionary: Dictionary):
        """Test get on an empty dictionary returns None."""
        assert dictionary.get("z") is None

    def test_get_never_inserted(self, dictionary: Dictionary):
        """Test get of a key that was never inserted returns None."""
        dictionary.put("a", "1")
        assert dictionary.get("b") is None
        # Same bucket as "a", different key
        assert dictionary.get("l") is None

    def test_get_does_not_mutate(self, colliding_dictionary: Dictionary):
        """Test lookups leave the chain order untouched."""
        before = colliding_dictionary.dump(full=True)
        colliding_dictionary.get("a")
        colliding_dictionary.get("missing")
        assert colliding_dictionary.dump(full=True) == before

    def test_empty_key_and_value(self, dictionary: Dictionary):
        """Test empty strings are valid keys and values."""
        dictionary.put("", "")
        assert dictionary.get("") == ""
        assert "" in dictionary

    def test_lone_surrogate_key(self, dictionary: Dictionary):
        """Test keys holding lone surrogates work with every operation."""
        dictionary.put("\ud800", "x")

        assert dictionary.get("\ud800") == "x"
        assert "\ud800" in dictionary
        assert dictionary.replace("\ud800", "y") is True
        assert dictionary.get("\ud800") == "y"
        assert dictionary.get("\udc00") is None

    def test_case_sensitive_keys(self, dictionary: Dictionary):
        """Test that keys are case-sensitive."""
        dictionary.put("Key", "value1")
        dictionary.put("KEY", "value2")
        dictionary.put("key", "value3")

        assert dictionary.get("Key") == "value1"
        assert dictionary.get("KEY") == "value2"
        assert dictionary.get("key") == "value3"
        assert dictionary.size() == 3

    def test_rejects_non_string(self, dictionary: Dictionary):
        """Test None keys and values raise TypeError."""
        with pytest.raises(TypeError):
            dictionary.put(None, "v")
        with pytest.raises(TypeError):
            dictionary.put("k", None)
        with pytest.raises(TypeError):
            dictionary.get(None)
        assert dictionary.size() == 0

    def test_allocation_failure_leaves_dictionary_unchanged(self, dictionary: Dictionary, monkeypatch):
        """Test a failed insert raises AllocationError and stores nothing."""
        dictionary.put("a", "1")

        def failing_entry(*args, **kwargs):
            raise MemoryError()

        monkeypatch.setattr(chain_module, "Entry", failing_entry)

        with pytest.raises(AllocationError):
            dictionary.put("b", "2")
        assert dictionary.get("b") is None
        assert dictionary.size() == 1

        # Updates create no entry, so they still succeed
        dictionary.put("a", "5")
        assert dictionary.get("a") == "5"


class TestDictionaryCollisions:
    """Test chaining of colliding keys."""

    def test_colliding_keys_share_bucket(self, colliding_dictionary: Dictionary):
        """Test colliding keys end up in one chain, all retrievable."""
        for key in COLLIDING_KEYS:
            assert colliding_dictionary.bucket_index(key) == 9

        assert colliding_dictionary.chain_lengths()[9] == 3
        assert colliding_dictionary.get("a") == "1"
        assert colliding_dictionary.get("l") == "2"
        assert colliding_dictionary.get("w") == "3"

    def test_most_recent_first(self, colliding_dictionary: Dictionary):
        """Test the last inserted key heads the chain."""
        lines = colliding_dictionary.dump(full=True).splitlines()
        assert lines[9] == "9: w: 3, l: 2, a: 1"

    def test_update_keeps_position(self, colliding_dictionary: Dictionary):
        """Test updating a key keeps its chain position."""
        colliding_dictionary.put("l", "X")

        lines = colliding_dictionary.dump(full=True).splitlines()
        assert lines[9] == "9: w: 3, l: X, a: 1"
        assert colliding_dictionary.size() == 3

    def test_single_bucket_table(self, single_bucket: Dictionary):
        """Test a one-bucket table still keeps keys unique."""
        for i in range(50):
            single_bucket.put(f"key{i}", f"value{i}")
        for i in range(50):
            single_bucket.put(f"key{i}", f"new{i}")

        assert single_bucket.size() == 50
        assert single_bucket.chain_lengths() == [50]
        assert single_bucket.get("key0") == "new0"
        assert single_bucket.get("key49") == "new49"

    def test_bucket_never_changes(self, dictionary: Dictionary):
        """Test a key's bucket is stable across updates and other inserts."""
        index = dictionary.bucket_index("stable")
        dictionary.put("stable", "1")
        for i in range(100):
            dictionary.put(f"other{i}", "x")
        dictionary.put("stable", "2")

        assert dictionary.bucket_index("stable") == index
        assert "stable: 2" in dictionary.dump(full=True).splitlines()[index]


class TestDictionaryReplace:
    """Test replace() method."""

    def test_replace_absent_key(self, dictionary: Dictionary):
        """Test replace("z","9") on an empty dictionary fails and changes nothing."""
        assert dictionary.replace("z", "9") is False
        assert dictionary.get("z") is None
        assert dictionary.size() == 0

    def test_replace_present_key(self, dictionary: Dictionary):
        """Test put("a","1"); replace("a","7") succeeds."""
        dictionary.put("a", "1")

        assert dictionary.replace("a", "7") is True
        assert dictionary.get("a") == "7"
        assert dictionary.size() == 1

    def test_replace_absent_in_used_bucket(self, colliding_dictionary: Dictionary):
        """Test replace of a missing key that shares a bucket is a no-op."""
        before = colliding_dictionary.dump(full=True)

        # "b" is absent; bucket 10. "" is absent; bucket 0.
        assert colliding_dictionary.replace("b", "x") is False
        assert colliding_dictionary.replace("", "x") is False
        assert colliding_dictionary.dump(full=True) == before

    def test_replace_stores_passed_object(self, dictionary: Dictionary):
        """Test replace keeps the caller's value object itself."""
        dictionary.put("a", "1")
        value = "".join(["new", "-", "value"])

        dictionary.replace("a", value)
        assert dictionary.get("a") is value

    def test_replace_rejects_non_string(self, dictionary: Dictionary):
        """Test replace with a None value raises TypeError."""
        dictionary.put("a", "1")
        with pytest.raises(TypeError):
            dictionary.replace("a", None)
        assert dictionary.get("a") == "1"


class TestDictionaryClear:
    """Test clear() method."""

    def test_clear_then_reuse(self, dictionary: Dictionary):
        """Test put a, b; clear; both gone; put("a","4") works."""
        dictionary.put("a", "1")
        dictionary.put("b", "2")

        dictionary.clear()

        assert dictionary.get("a") is None
        assert dictionary.get("b") is None

        dictionary.put("a", "4")
        assert dictionary.get("a") == "4"
        assert dictionary.size() == 1

    def test_clear_releases_long_chains(self, colliding_dictionary: Dictionary):
        """Test clear releases every entry of a chain longer than two."""
        entries = list(colliding_dictionary._buckets[9])
        assert len(entries) == 3

        colliding_dictionary.clear()

        assert colliding_dictionary.size() == 0
        assert colliding_dictionary.chain_lengths() == [0] * 11
        assert all(entry.next is None for entry in entries)
        for key in COLLIDING_KEYS:
            assert colliding_dictionary.get(key) is None

    def test_clear_matches_fresh_dictionary(self, colliding_dictionary: Dictionary):
        """Test a cleared dictionary behaves like a new one."""
        fresh = Dictionary(table_size=11)
        colliding_dictionary.clear()

        assert colliding_dictionary.dump() == fresh.dump()

        for d in (colliding_dictionary, fresh):
            d.put("l", "1")
            d.put("a", "2")
        assert colliding_dictionary.dump(full=True) == fresh.dump(full=True)

    def test_clear_empty_dictionary(self, dictionary: Dictionary):
        """Test clear on an empty dictionary doesn't error."""
        dictionary.clear()
        assert dictionary.size() == 0

    def test_clear_many_keys(self, dictionary: Dictionary):
        """Test clear after filling every bucket several deep."""
        for i in range(200):
            dictionary.put(f"key{i}", f"value{i}")

        dictionary.clear()

        assert dictionary.size() == 0
        assert all(dictionary.get(f"key{i}") is None for i in range(200))


class TestDictionaryDump:
    """Test dump() and print_dictionary()."""

    def test_dump_empty(self, dictionary: Dictionary):
        """Test every bucket of an empty table shows NULL."""
        assert dictionary.dump() == "\n".join(f"{i}: NULL" for i in range(11))

    def test_dump_first_entry_only(self, colliding_dictionary: Dictionary):
        """Test the default dump shows only the head of each chain."""
        colliding_dictionary.put("b", "2")
        lines = colliding_dictionary.dump().splitlines()

        assert len(lines) == 11
        assert lines[9] == "9: w: 3"
        assert lines[10] == "10: b: 2"
        assert lines[0] == "0: NULL"

    def test_print_dictionary(self, dictionary: Dictionary):
        """Test print_dictionary writes the dump and a newline."""
        dictionary.put("a", "1")
        stream = io.StringIO()

        print_dictionary(dictionary, file=stream)
        assert stream.getvalue() == dictionary.dump() + "\n"


class TestDictionaryInspection:
    """Test size, membership and statistics helpers."""

    def test_len_and_contains(self, colliding_dictionary: Dictionary):
        """Test len() and the in operator."""
        assert len(colliding_dictionary) == 3
        assert "a" in colliding_dictionary
        assert "b" not in colliding_dictionary
        assert None not in colliding_dictionary
        assert colliding_dictionary.exists("w") is True

    def test_keys(self, colliding_dictionary: Dictionary):
        """Test keys come out bucket by bucket, chain order within a bucket."""
        colliding_dictionary.put("z", "0")  # bucket 1
        assert colliding_dictionary.keys() == ["z", "w", "l", "a"]

    def test_get_stats(self, colliding_dictionary: Dictionary):
        """Test statistics of a table with one three-entry chain."""
        colliding_dictionary.put("b", "4")
        stats = colliding_dictionary.get_stats()

        assert stats["total_keys"] == 4
        assert stats["table_size"] == 11
        assert stats["load_factor"] == pytest.approx(4 / 11)
        assert stats["empty_buckets"] == 9
        assert stats["longest_chain"] == 3


class TestDictionaryLogging:
    """Test debug logging of mutations."""

    def test_put_and_clear_are_logged(self, dictionary: Dictionary, caplog):
        """Test inserts, updates and clears emit debug records."""
        with caplog.at_level(logging.DEBUG, logger="chaindict.table.dictionary"):
            dictionary.put("a", "1")
            dictionary.put("a", "2")
            dictionary.clear()

        messages = [record.getMessage() for record in caplog.records]
        assert "Inserted 'a' into bucket 9" in messages
        assert "Updated 'a' in bucket 9" in messages
        assert "Cleared 1 entries" in messages

"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import io

import pytest

from chaindict.console.session import ConsoleSession
from chaindict.protocol.parser import ProtocolParser
from chaindict.table.chain import Chain
from chaindict.table.dictionary import Dictionary


# Single-character keys that all hash to bucket 9 of an 11-bucket table
COLLIDING_KEYS = ("a", "l", "w")


# ============================================================================
# Table Fixtures
# ============================================================================

@pytest.fixture
def dictionary() -> Dictionary:
    """Create a fresh Dictionary with the standard 11 buckets."""
    return Dictionary(table_size=11)


@pytest.fixture
def single_bucket() -> Dictionary:
    """Create a Dictionary with one bucket, so every key collides."""
    return Dictionary(table_size=1)


@pytest.fixture
def chain() -> Chain:
    """Create an empty Chain."""
    return Chain()


@pytest.fixture
def colliding_dictionary(dictionary: Dictionary) -> Dictionary:
    """Dictionary holding a, l, w (values 1, 2, 3) chained in bucket 9."""
    for i, key in enumerate(COLLIDING_KEYS, start=1):
        dictionary.put(key, str(i))
    return dictionary


# ============================================================================
# Protocol Fixtures
# ============================================================================

@pytest.fixture
def parser() -> ProtocolParser:
    """Create a ProtocolParser instance."""
    return ProtocolParser()


# ============================================================================
# Console Fixtures
# ============================================================================

@pytest.fixture
def run_session(dictionary: Dictionary):
    """
    Factory fixture running a console session over a script.

    Usage:
        def test_something(run_session):
            output, executed = run_session("PUT a 1\\nGET a\\n")
    """
    def factory(script: str):
        stdout = io.StringIO()
        session = ConsoleSession(dictionary, io.StringIO(script), stdout)
        executed = session.run()
        return stdout.getvalue(), executed
    return factory

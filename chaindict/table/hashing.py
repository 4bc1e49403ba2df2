"""
Bucket Hashing Module

Maps a key to the index of the bucket that owns it.

Hash Scheme:
- Fold every byte of the UTF-8 encoded key into an accumulator:
  acc = byte + 31 * acc
- The accumulator is an unsigned 32-bit integer (wraps modulo 2**32)
- Reduce the accumulator modulo the table size

The hash is unseeded, so the same key always maps to the same bucket
across runs. It gives no protection against deliberately colliding keys.
"""

from ..config.settings import settings

HASH_MULTIPLIER = 31
_UINT32_MASK = 0xFFFFFFFF


def string_hash(key: str) -> int:
    """
    Compute the raw (unreduced) 32-bit hash of a key.

    Args:
        key: The key to hash

    Returns:
        Unsigned 32-bit accumulator value

    Raises:
        TypeError: If key is not a string
    """
    if not isinstance(key, str):
        raise TypeError(f"key must be str, not {type(key).__name__}")

    acc = 0
    # surrogatepass keeps the hash total over lone surrogates like "\ud800"
    for byte in key.encode("utf-8", "surrogatepass"):
        acc = (byte + HASH_MULTIPLIER * acc) & _UINT32_MASK
    return acc


def hash_key(key: str, table_size: int = None) -> int:
    """
    Calculate which bucket owns a given key.

    Args:
        key: The key to hash
        table_size: Number of buckets (default from settings.TABLE_SIZE)

    Returns:
        Bucket index in the range [0, table_size)

    Raises:
        TypeError: If key is not a string
        ValueError: If table_size is not positive
    """
    size = table_size if table_size is not None else settings.TABLE_SIZE
    if size <= 0:
        raise ValueError("table_size must be positive")
    return string_hash(key) % size

"""Exception hierarchy for chain-dict."""


class ChainDictError(Exception):
    """Base exception for all chain-dict errors."""


class AllocationError(ChainDictError, MemoryError):
    """Raised when memory for the table, an entry or a value can't be obtained.

    The operation that raised it did not take effect.
    """

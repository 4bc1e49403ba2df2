"""Console module for chain-dict."""

from .session import ConsoleSession

__all__ = ["ConsoleSession"]

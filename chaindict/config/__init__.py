"""Configuration module for chain-dict."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]

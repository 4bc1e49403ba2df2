"""
chain-dict Configuration Settings

This module contains the configuration constants for the dictionary and
its console. Values can be overridden through environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Dictionary and console configuration settings."""

    # Table settings
    TABLE_SIZE: int = int(os.environ.get("CHAINDICT_TABLE_SIZE", "11"))

    # Console input limits
    MAX_KEY_LENGTH: int = 256
    MAX_VALUE_LENGTH: int = 256
    PROMPT: str = "> "

    # Logging settings
    DEBUG: bool = os.environ.get("CHAINDICT_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("CHAINDICT_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()

"""
Console Command and Response Definitions

This module defines the data structures for console commands and responses.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class CommandType(Enum):
    """Enumeration of supported command types."""
    PUT = auto()
    GET = auto()
    REPLACE = auto()
    CLEAR = auto()
    DUMP = auto()
    STATS = auto()
    QUIT = auto()
    UNKNOWN = auto()


class ResponseStatus(Enum):
    """Enumeration of response statuses."""
    OK = "OK"
    ERROR = "ERROR"


@dataclass
class Command:
    """
    Represents a parsed console command.

    Attributes:
        type: The type of command
        key: The key for the operation (empty for table-wide commands)
        value: The value for PUT/REPLACE (empty for other operations)
        full: For DUMP, list whole chains instead of their first entry
        raw: The original raw command string
    """
    type: CommandType
    key: str = ""
    value: str = ""
    full: bool = False
    raw: str = ""

    @property
    def is_valid(self) -> bool:
        """Check if the command is valid for its type."""
        if self.type == CommandType.UNKNOWN:
            return False
        if self.type == CommandType.GET:
            return bool(self.key)
        if self.type in (CommandType.PUT, CommandType.REPLACE):
            return bool(self.key) and bool(self.value)
        return True


@dataclass
class Response:
    """
    Represents a console response.

    Attributes:
        status: OK or ERROR
        message: Response message or error description
        value: The value returned (for GET operations)
        body: Extra lines printed after the status line (for DUMP)
    """
    status: ResponseStatus
    message: str = ""
    value: Optional[str] = None
    body: str = ""

    @classmethod
    def ok(cls, message: str = "", value: Optional[str] = None, body: str = "") -> "Response":
        """Create a successful response."""
        return cls(status=ResponseStatus.OK, message=message, value=value, body=body)

    @classmethod
    def error(cls, message: str) -> "Response":
        """Create an error response."""
        return cls(status=ResponseStatus.ERROR, message=message)

    @classmethod
    def stored(cls) -> "Response":
        """Create a 'stored' response for PUT operations."""
        return cls.ok(message="stored")

    @classmethod
    def replaced(cls) -> "Response":
        """Create a 'replaced' response for REPLACE operations."""
        return cls.ok(message="replaced")

    @classmethod
    def cleared(cls) -> "Response":
        """Create a 'cleared' response for CLEAR operations."""
        return cls.ok(message="cleared")

    @classmethod
    def key_not_found(cls) -> "Response":
        """Create a 'key not found' error response."""
        return cls.error(message="key not found")

    @classmethod
    def value_response(cls, value: str) -> "Response":
        """Create a GET response with a value."""
        return cls.ok(value=value)

    @classmethod
    def dump_response(cls, listing: str) -> "Response":
        """Create a DUMP response carrying the bucket listing."""
        return cls.ok(body=listing)

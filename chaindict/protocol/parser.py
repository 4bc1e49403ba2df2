"""
Console Parser Module

This module handles parsing of raw console lines and formatting of responses.
"""

from .commands import Command, CommandType, Response
from ..config.settings import settings


class ProtocolParser:
    """
    Parser for the chain-dict console protocol.

    Protocol Format:
        Request:  <COMMAND> [ARGS...]\n
        Response: <STATUS> [DATA]\n[BODY\n]

    Commands:
        PUT <key> <value>        -> OK stored
        GET <key>                -> OK <value> | ERROR key not found
        REPLACE <key> <value>    -> OK replaced | ERROR key not found
        CLEAR                    -> OK cleared
        DUMP [ALL]               -> OK followed by one line per bucket
        STATS                    -> OK total_keys=... table_size=... ...
        QUIT                     -> (session ended)

    Constraints:
        - Keys: max 256 characters, no whitespace
        - Values: max 256 characters, no whitespace
    """

    def __init__(self):
        """Initialize the parser with constraints from settings."""
        self.max_key_length = settings.MAX_KEY_LENGTH
        self.max_value_length = settings.MAX_VALUE_LENGTH

    def parse_request(self, data: str) -> Command:
        """
        Parse a raw request string into a Command object.

        Args:
            data: Raw request string (may include trailing newline)

        Returns:
            Command object representing the parsed request.
            Returns Command with type=UNKNOWN for invalid/malformed requests.

        Examples:
            >>> parser = ProtocolParser()
            >>> cmd = parser.parse_request("PUT mykey myvalue")
            >>> cmd.type == CommandType.PUT
            True
            >>> cmd.key
            'mykey'
        """
        raw = data.strip()
        if not raw:
            return Command(type=CommandType.UNKNOWN, raw=raw)

        parts = raw.split()
        command_name = parts[0].upper()

        if command_name == "PUT":
            return self._parse_key_value(CommandType.PUT, parts, raw)
        if command_name == "REPLACE":
            return self._parse_key_value(CommandType.REPLACE, parts, raw)
        if command_name == "GET":
            return self._parse_get(parts, raw)
        if command_name == "DUMP":
            return self._parse_dump(parts, raw)
        if command_name in ("CLEAR", "STATS", "QUIT"):
            # These take no args
            if len(parts) == 1:
                return Command(type=CommandType[command_name], raw=raw)
            return Command(type=CommandType.UNKNOWN, raw=raw)

        return Command(type=CommandType.UNKNOWN, raw=raw)

    def _parse_key_value(self, command_type: CommandType, parts: list, raw: str) -> Command:
        """
        Parse a PUT or REPLACE command.

        Format: PUT <key> <value> | REPLACE <key> <value>
        """
        if len(parts) != 3:
            return Command(type=CommandType.UNKNOWN, raw=raw)

        key, value = parts[1], parts[2]
        if len(key) > self.max_key_length or len(value) > self.max_value_length:
            return Command(type=CommandType.UNKNOWN, raw=raw)

        return Command(type=command_type, key=key, value=value, raw=raw)

    def _parse_get(self, parts: list, raw: str) -> Command:
        """
        Parse a GET command.

        Format: GET <key>
        """
        if len(parts) != 2:
            return Command(type=CommandType.UNKNOWN, raw=raw)

        key = parts[1]
        if len(key) > self.max_key_length:
            return Command(type=CommandType.UNKNOWN, raw=raw)

        return Command(type=CommandType.GET, key=key, raw=raw)

    def _parse_dump(self, parts: list, raw: str) -> Command:
        """
        Parse a DUMP command.

        Format: DUMP [ALL]
        """
        if len(parts) == 1:
            return Command(type=CommandType.DUMP, raw=raw)
        if len(parts) == 2 and parts[1].upper() == "ALL":
            return Command(type=CommandType.DUMP, full=True, raw=raw)
        return Command(type=CommandType.UNKNOWN, raw=raw)

    def format_response(self, response: Response) -> str:
        """
        Format a Response object into a protocol string.

        Args:
            response: Response object to format

        Returns:
            Formatted response string WITH trailing newline.

        Examples:
            >>> parser = ProtocolParser()
            >>> parser.format_response(Response.stored())
            'OK stored\\n'
            >>> parser.format_response(Response.value_response("hello"))
            'OK hello\\n'
            >>> parser.format_response(Response.error("key not found"))
            'ERROR key not found\\n'
        """
        prefix = response.status.value

        # If value is provided (GET), prefer it; otherwise use message
        if response.value is not None:
            text = response.value
        else:
            text = response.message

        line = f"{prefix} {text}\n" if text else f"{prefix}\n"
        if response.body:
            return f"{line}{response.body}\n"
        return line

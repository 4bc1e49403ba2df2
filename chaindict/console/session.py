"""
Console Session Module

Drives a Dictionary from a stream of text commands, one per line, and
writes one formatted response per command. Used by the `chaindict`
entry point for both interactive use and script files.
"""

import logging
from typing import Optional, TextIO

from ..exceptions import ChainDictError
from ..protocol.commands import Command, CommandType, Response
from ..protocol.parser import ProtocolParser
from ..table.dictionary import Dictionary

logger = logging.getLogger(__name__)


class ConsoleSession:
    """
    Line-oriented console for a single Dictionary.

    Features:
    - One command per line, one response per command
    - Blank lines and lines starting with '#' are skipped
    - Malformed commands get an error response; the session keeps going
    - Ends on QUIT or end of input

    Usage:
        session = ConsoleSession(Dictionary(), sys.stdin, sys.stdout)
        session.run()

    Attributes:
        dictionary: The Dictionary commands operate on
        parser: The ProtocolParser for parsing commands
    """

    def __init__(
            self,
            dictionary: Dictionary = None,
            stdin: TextIO = None,
            stdout: TextIO = None,
            prompt: Optional[str] = None,
    ):
        """
        Initialize the session.

        Args:
            dictionary: Dictionary instance (creates new one if not provided)
            stdin: Stream commands are read from
            stdout: Stream responses are written to
            prompt: Text written before each read, or None for no prompt
        """
        self.dictionary = dictionary if dictionary is not None else Dictionary()
        self.parser = ProtocolParser()
        self.stdin = stdin
        self.stdout = stdout
        self.prompt = prompt
        self._total_commands = 0

    def run(self) -> int:
        """
        Process commands until QUIT or end of input.

        Returns:
            Number of commands executed (invalid and skipped lines excluded)
        """
        while True:
            if self.prompt:
                self.stdout.write(self.prompt)
                self.stdout.flush()

            line = self.stdin.readline()
            if not line:
                logger.debug("End of input")
                break

            raw = line.strip()
            if not raw or raw.startswith("#"):
                continue

            command = self.parser.parse_request(raw)
            if command.type == CommandType.QUIT:
                logger.debug("Quit requested")
                break

            response = self.handle_command(command)
            self.stdout.write(self.parser.format_response(response))
            self.stdout.flush()

        return self._total_commands

    def handle_command(self, command: Command) -> Response:
        """
        Validate and execute a parsed command.

        Errors raised by the dictionary are turned into ERROR responses.
        """
        if not command.is_valid:
            logger.debug(f"Invalid command: {command.raw!r}")
            return Response.error("invalid command")

        self._total_commands += 1
        try:
            return self._execute_command(command)
        except ChainDictError as exc:
            logger.error(f"{command.type.name} failed: {exc}")
            return Response.error(str(exc))

    def _execute_command(self, command: Command) -> Response:
        """
        Route a command to the matching Dictionary method.

        Args:
            command: The Command object to execute

        Returns:
            Response object with the result
        """
        if command.type == CommandType.PUT:
            self.dictionary.put(command.key, command.value)
            return Response.stored()

        if command.type == CommandType.GET:
            value = self.dictionary.get(command.key)
            return Response.value_response(value) if value is not None else Response.key_not_found()

        if command.type == CommandType.REPLACE:
            replaced = self.dictionary.replace(command.key, command.value)
            return Response.replaced() if replaced else Response.key_not_found()

        if command.type == CommandType.CLEAR:
            self.dictionary.clear()
            return Response.cleared()

        if command.type == CommandType.DUMP:
            return Response.dump_response(self.dictionary.dump(full=command.full))

        if command.type == CommandType.STATS:
            stats = self.dictionary.get_stats()
            stats["load_factor"] = f"{stats['load_factor']:.2f}"
            return Response.ok(message=" ".join(f"{k}={v}" for k, v in stats.items()))

        return Response.error("invalid command")

    def get_stats(self) -> dict:
        """Get session statistics, including the dictionary's."""
        return {
            "total_commands": self._total_commands,
            "dictionary_stats": self.dictionary.get_stats(),
        }

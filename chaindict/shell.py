#!/usr/bin/env python3
"""
chain-dict Console Entry Point

Runs a console session against a fresh dictionary, reading commands from
a script file or from stdin.

Usage:
    python -m chaindict.shell                      # Interactive, default table
    python -m chaindict.shell commands.txt         # Run a script file
    python -m chaindict.shell --table-size 31      # Custom number of buckets
    python -m chaindict.shell --debug              # Enable debug logging

Environment Variables:
    CHAINDICT_TABLE_SIZE  - Number of buckets
    CHAINDICT_DEBUG       - Enable debug mode (true/false)
    CHAINDICT_LOG_LEVEL   - Log level when not in debug mode
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config.settings import settings
from .console.session import ConsoleSession
from .table.dictionary import Dictionary


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="chain-dict: In-Memory Chained Hash Table Console",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "script",
        nargs="?",
        default=None,
        help="File of commands to run (reads stdin if omitted)",
    )

    parser.add_argument(
        "--table-size",
        type=int,
        default=settings.TABLE_SIZE,
        help="Number of buckets in the table",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            # stdout carries the console responses
            logging.StreamHandler(sys.stderr),
        ]
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the console."""
    args = parse_args(argv)

    setup_logging(debug=args.debug)
    logger = logging.getLogger(__name__)

    if args.table_size <= 0:
        logger.error(f"Invalid table size: {args.table_size}")
        return 2

    dictionary = Dictionary(table_size=args.table_size)
    logger.debug(f"Created dictionary with {args.table_size} buckets")

    if args.script:
        try:
            stream = open(args.script, encoding="utf-8")
        except OSError as e:
            logger.error(f"Cannot read script {args.script}: {e}")
            return 1

        with stream:
            session = ConsoleSession(dictionary, stream, sys.stdout)
            executed = session.run()
    else:
        prompt = settings.PROMPT if sys.stdin.isatty() else None
        session = ConsoleSession(dictionary, sys.stdin, sys.stdout, prompt=prompt)
        try:
            executed = session.run()
        except KeyboardInterrupt:
            logger.info("Keyboard interrupt received")
            executed = session.get_stats()["total_commands"]

    logger.debug(f"Session finished after {executed} commands")
    return 0


if __name__ == "__main__":
    sys.exit(main())

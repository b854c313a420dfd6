#!/usr/bin/env python3
"""
MiniDB Entry Point

Runs a single command, or starts the interactive shell when no command is
given.

Usage:
    python -m minidb.main                          # Interactive shell
    python -m minidb.main STORE age 25             # Single command
    python -m minidb.main --debug GET age          # Enable debug logging

Environment Variables:
    MINIDB_PROMPT       - Interactive prompt
    MINIDB_DEBUG        - Enable debug mode (true/false)
    MINIDB_LOG_LEVEL    - Log level when not in debug mode
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config.settings import settings
from .console.formatting import format_result
from .console.repl import Shell
from .protocol.executor import Executor


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="MiniDB: In-Memory Key-Value Store",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Command to run once, e.g. STORE age 25 (omit for interactive mode)",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else settings.LOG_LEVEL

    logging.basicConfig(
        level=level,
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )


def run_command(command: str, executor: Optional[Executor] = None) -> int:
    """
    Execute one command line and print its outcome.

    Args:
        command: The command line to execute
        executor: Executor to use (creates a new one if not provided)

    Returns:
        Process exit status: 0 on success, 1 if the command failed
    """
    executor = executor if executor is not None else Executor()
    result = executor.execute(command)
    output = format_result(result)

    if result.is_error:
        print(output, file=sys.stderr)
        return 1

    if output is not None:
        print(output)
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for MiniDB."""
    args = parse_args(argv)
    setup_logging(debug=args.debug)
    logger = logging.getLogger(__name__)

    if not args.command:
        Shell().run()
        return

    command = " ".join(args.command)
    logger.debug(f"Running single command: {command!r}")
    sys.exit(run_command(command))


if __name__ == "__main__":
    main()

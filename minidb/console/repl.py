"""
Interactive Shell for MiniDB

Reads command lines from the terminal, runs them through an Executor and
prints the results.

Shell commands (handled here, never sent to the executor):
    exit    - Leave the shell
    show    - Print every stored key and value
    help    - Show the command reference
"""

import logging
import sys
from typing import Optional

# Enable command history with arrow keys (works on Unix systems)
try:
    import readline
except ImportError:
    pass  # readline not available on Windows by default

from .formatting import format_result, format_snapshot
from ..config.settings import settings
from ..protocol.executor import Executor

logger = logging.getLogger(__name__)

BANNER = """MiniDB Interactive Mode
Commands: STORE [key] [value], GET [key]
Type "exit" to quit, "show" to display all data
"""

HELP_TEXT = """
MiniDB Commands:
----------------
  STORE <key> <value>       Store a value (storing again appends to a list)
  GET <key>                 Retrieve the value for a key

Shell Commands:
---------------
  show                      Display all stored data
  help                      Show this help message
  exit                      Exit the shell

Examples:
---------
  STORE age 25              Store the number 25 under "age"
  STORE name "John Doe"     Quote values that contain spaces
  GET name                  Get the value for "name"
"""


class Shell:
    """
    Read-eval-print loop around one Executor.

    Attributes:
        executor: The Executor that runs every non-shell command
        prompt: Prompt printed before each line
    """

    def __init__(self, executor: Optional[Executor] = None, prompt: Optional[str] = None):
        self.executor = executor if executor is not None else Executor()
        self.prompt = prompt if prompt is not None else settings.PROMPT

    def handle_line(self, line: str) -> bool:
        """
        Process one input line.

        Args:
            line: The raw line read from the user

        Returns:
            False when the session should end, True otherwise
        """
        command = line.strip()

        if command == "exit":
            print("Goodbye!")
            return False

        if command == "show":
            print(format_snapshot(self.executor.store.snapshot()))
            return True

        if command == "help":
            print(HELP_TEXT)
            return True

        if not command:
            return True

        result = self.executor.execute(command)
        output = format_result(result)
        if result.is_error:
            print(output, file=sys.stderr)
        elif output is not None:
            print(output)
        return True

    def run(self) -> None:
        """Run the shell until exit, end of input or Ctrl-C."""
        print(BANNER)
        logger.info("Interactive session started")

        try:
            while True:
                try:
                    line = input(self.prompt)
                except EOFError:
                    print("\nGoodbye!")
                    break

                if not self.handle_line(line):
                    break

        except KeyboardInterrupt:
            print("\n\nInterrupted. Goodbye!")
        finally:
            logger.info(f"Interactive session ended: {self.executor.store.get_stats()}")

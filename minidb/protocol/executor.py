"""
Command Executor Module

Runs parsed commands against the Store owned by the executor and reports
the outcome as a Result.
"""

import logging
from typing import Optional

from .commands import Command, CommandType, Result
from .errors import CommandError, KeyNotFoundError
from .parser import CommandParser
from ..storage.store import Store
from ..storage.values import Scalar

logger = logging.getLogger(__name__)


class Executor:
    """
    Executes MiniDB commands against one Store.

    Usage:
        executor = Executor()
        executor.execute("STORE age 25")   # Result(message='Stored: age = 25')
        executor.execute("GET age")        # Result(value=Scalar(NUMBER, 25.0))

    Attributes:
        store: The Store this executor reads and mutates
        parser: The CommandParser used to read command lines
    """

    def __init__(self, store: Optional[Store] = None):
        """
        Initialize the executor.

        Args:
            store: Store instance (creates a new one if not provided)
        """
        self.store = store if store is not None else Store()
        self.parser = CommandParser()

    def execute(self, command: str) -> Result:
        """
        Parse and execute one command line.

        Args:
            command: Raw command line

        Returns:
            Result with status EMPTY for blank input, OK on success and
            ERROR (with its ErrorKind) when the command fails. A failed
            command never changes the store.
        """
        try:
            parsed = self.parser.parse_request(command)
            if parsed is None:
                return Result.empty()
            return self._execute_command(parsed)
        except CommandError as exc:
            logger.debug(f"Command failed ({exc.kind.name}): {exc.message}")
            return Result.failure(exc)

    def _execute_command(self, command: Command) -> Result:
        """Route a parsed command to its handler."""
        logger.debug(f"Executing {command.type.name}: {command.raw!r}")

        if command.type == CommandType.STORE:
            return self._execute_store(command)
        if command.type == CommandType.GET:
            return self._execute_get(command)

        raise ValueError(f"unhandled command type: {command.type}")

    def _execute_store(self, command: Command) -> Result:
        value = self.store.put(command.key, Scalar.coerce(command.value))
        if value.is_list:
            return Result.appended(command.key, value)
        return Result.stored(command.key, value)

    def _execute_get(self, command: Command) -> Result:
        if not self.store.exists(command.key):
            raise KeyNotFoundError(command.key)
        return Result.value_response(self.store.get(command.key))

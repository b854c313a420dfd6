"""
Command Errors

Every failure a command can produce belongs to one ErrorKind. The parser and
executor raise the matching CommandError subclass; Executor.execute turns it
into an ERROR Result at its boundary.
"""

from enum import Enum


class ErrorKind(Enum):
    """Enumeration of command failure kinds."""
    UNKNOWN_COMMAND = "unknown_command"
    ARGUMENT_COUNT = "argument_count"
    KEY_NOT_FOUND = "key_not_found"


class CommandError(Exception):
    """Base class for errors raised while executing a command."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownCommandError(CommandError):
    """The first token is not a recognized operation."""

    kind = ErrorKind.UNKNOWN_COMMAND

    def __init__(self, operation: str):
        super().__init__(f"Unknown command: {operation}")
        self.operation = operation


class ArgumentCountError(CommandError):
    """The operation received the wrong number of tokens."""

    kind = ErrorKind.ARGUMENT_COUNT

    def __init__(self, operation: str, arguments: int, usage: str):
        noun = "argument" if arguments == 1 else "arguments"
        super().__init__(
            f"{operation} command requires exactly {arguments} {noun}: {usage}"
        )
        self.operation = operation
        self.usage = usage


class KeyNotFoundError(CommandError):
    """GET targeted a key that was never stored."""

    kind = ErrorKind.KEY_NOT_FOUND

    def __init__(self, key: str):
        super().__init__(f"Key not found: {key}")
        self.key = key

"""
Command and Result Definitions

This module defines the data structures passed between the parser, the
executor and the console.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .errors import CommandError, ErrorKind
from ..storage.values import Value


class CommandType(Enum):
    """Enumeration of supported command types."""
    STORE = auto()
    GET = auto()


class ResultStatus(Enum):
    """Enumeration of result statuses."""
    OK = "OK"
    EMPTY = "EMPTY"
    ERROR = "ERROR"


@dataclass
class Command:
    """
    Represents a parsed, arity-checked command.

    Attributes:
        type: The type of command (STORE or GET)
        key: The key for the operation
        value: The raw value literal for STORE (empty for GET)
        raw: The original command line, stripped
    """
    type: CommandType
    key: str
    value: str = ""
    raw: str = ""


@dataclass
class Result:
    """
    Represents the outcome of one execute() call.

    Attributes:
        status: OK, EMPTY (blank input) or ERROR
        message: Confirmation for STORE, error description for ERROR
        value: The stored value returned by GET
        error: The failure kind when status is ERROR
        exception: The CommandError behind an ERROR result
    """
    status: ResultStatus
    message: str = ""
    value: Optional[Value] = None
    error: Optional[ErrorKind] = None
    exception: Optional[CommandError] = None

    @classmethod
    def ok(cls, message: str = "", value: Optional[Value] = None) -> "Result":
        """Create a successful result."""
        return cls(status=ResultStatus.OK, message=message, value=value)

    @classmethod
    def empty(cls) -> "Result":
        """Create the no-op result for blank input."""
        return cls(status=ResultStatus.EMPTY)

    @classmethod
    def failure(cls, exc: CommandError) -> "Result":
        """Create an error result from a CommandError."""
        return cls(
            status=ResultStatus.ERROR,
            message=exc.message,
            error=exc.kind,
            exception=exc,
        )

    @classmethod
    def stored(cls, key: str, value: Value) -> "Result":
        """Create the confirmation for a STORE to a new key."""
        return cls.ok(message=f"Stored: {key} = {value.render()}")

    @classmethod
    def appended(cls, key: str, value: Value) -> "Result":
        """Create the confirmation for a STORE to an existing key."""
        return cls.ok(message=f"Appended to {key}: {value.render()}")

    @classmethod
    def value_response(cls, value: Value) -> "Result":
        """Create a GET result carrying the stored value."""
        return cls.ok(value=value)

    @property
    def is_ok(self) -> bool:
        return self.status == ResultStatus.OK

    @property
    def is_empty(self) -> bool:
        return self.status == ResultStatus.EMPTY

    @property
    def is_error(self) -> bool:
        return self.status == ResultStatus.ERROR

    def unwrap(self) -> Optional[Value]:
        """
        Return the GET value, or re-raise the error behind a failed result.

        Raises:
            CommandError: If the result is an ERROR
        """
        if self.exception is not None:
            raise self.exception
        return self.value

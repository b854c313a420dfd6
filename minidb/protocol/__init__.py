"""Protocol module for MiniDB."""

from .commands import Command, CommandType, Result, ResultStatus
from .errors import (
    ArgumentCountError,
    CommandError,
    ErrorKind,
    KeyNotFoundError,
    UnknownCommandError,
)
from .executor import Executor
from .parser import CommandParser
from .tokenizer import tokenize

__all__ = [
    "Command",
    "CommandType",
    "Result",
    "ResultStatus",
    "ErrorKind",
    "CommandError",
    "UnknownCommandError",
    "ArgumentCountError",
    "KeyNotFoundError",
    "CommandParser",
    "Executor",
    "tokenize",
]

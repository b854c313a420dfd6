"""
Command Parser Module

This module turns a raw command line into a Command object.

Grammar:
    STORE <key> <value>
    GET <key>

Keys and values are bare tokens or double-quoted strings. The operation
keyword is case-insensitive; keys are case-sensitive.
"""

import logging
from typing import List, Optional

from .commands import Command, CommandType
from .errors import ArgumentCountError, UnknownCommandError
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

STORE_USAGE = "STORE [key] [value]"
GET_USAGE = "GET [key]"


class CommandParser:
    """
    Parser for the MiniDB command language.

    Commands:
        STORE <key> <value>   -> Stored: <key> = <value>
                               | Appended to <key>: [..]
        GET <key>             -> <value> | Key not found: <key>
    """

    def parse_request(self, data: str) -> Optional[Command]:
        """
        Parse a raw command line into a Command object.

        Args:
            data: Raw command line (may include surrounding whitespace)

        Returns:
            The parsed Command, or None if the line holds no tokens.

        Raises:
            UnknownCommandError: If the operation is not STORE or GET
            ArgumentCountError: If the operation has the wrong token count

        Examples:
            >>> parser = CommandParser()
            >>> cmd = parser.parse_request('store name "John Doe"')
            >>> cmd.type == CommandType.STORE
            True
            >>> cmd.value
            'John Doe'
        """
        raw = data.strip()
        tokens = tokenize(raw)
        if not tokens:
            return None

        operation = tokens[0].upper()
        logger.debug(f"Parsing {operation} with {len(tokens) - 1} argument(s)")

        if operation == "STORE":
            return self._parse_store(tokens, raw)
        if operation == "GET":
            return self._parse_get(tokens, raw)

        raise UnknownCommandError(operation)

    def _parse_store(self, tokens: List[str], raw: str) -> Command:
        """
        Parse a STORE command.

        Format: STORE <key> <value>
        """
        if len(tokens) != 3:
            raise ArgumentCountError("STORE", 2, STORE_USAGE)

        return Command(
            type=CommandType.STORE,
            key=tokens[1],
            value=tokens[2],
            raw=raw,
        )

    def _parse_get(self, tokens: List[str], raw: str) -> Command:
        """
        Parse a GET command.

        Format: GET <key>
        """
        if len(tokens) != 2:
            raise ArgumentCountError("GET", 1, GET_USAGE)

        return Command(type=CommandType.GET, key=tokens[1], raw=raw)

"""
Command Tokenizer

Splits a raw command line into tokens on unquoted spaces. A double-quoted
span becomes a single token and may contain spaces.

The closing quote flushes the current token immediately, so text glued to
the end of a quoted span starts a new token:

    >>> tokenize('STORE name "John Doe"')
    ['STORE', 'name', 'John Doe']
    >>> tokenize('"ab"cd')
    ['ab', 'cd']
"""

from typing import List

QUOTE = '"'
SPACE = ' '


def tokenize(data: str) -> List[str]:
    """
    Convert a command line into an ordered list of tokens.

    An unterminated quote runs to the end of the input without error.
    Empty input produces an empty list.
    """
    tokens: List[str] = []
    current = ""
    in_quotes = False

    for char in data:
        if char == QUOTE:
            in_quotes = not in_quotes
            if not in_quotes and current:
                tokens.append(current)
                current = ""
        elif char == SPACE and not in_quotes:
            if current:
                tokens.append(current)
                current = ""
        else:
            current += char

    if current:
        tokens.append(current)

    return tokens

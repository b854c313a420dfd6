"""
Stored Value Definitions

A key holds either a single Scalar (a number or a string) or, once it has
been stored more than once, a ListValue of every Scalar stored under it.
Each value carries an explicit ValueKind tag so callers branch on the tag
instead of inspecting Python types.
"""

import json
import math
import re
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, List, Union

# Sign, ASCII digits with optional fraction (or a bare fraction), optional exponent
NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# Magnitudes in [MIN_PLAIN_NUMBER, MAX_PLAIN_INTEGER) render positionally
MIN_PLAIN_NUMBER = 1e-6
MAX_PLAIN_INTEGER = 1e21


class ValueKind(Enum):
    """Tag for every value the store can hold."""
    NUMBER = "number"
    STRING = "string"
    LIST = "list"


def is_number_literal(literal: str) -> bool:
    """Return True if the whole literal is a decimal number."""
    return NUMBER_PATTERN.fullmatch(literal) is not None


def format_number(number: float) -> str:
    """
    Render a number the way it is echoed back to the user.

    Uses the shortest digits that round-trip. Magnitudes from 1e-6 up to
    1e21 print positionally; anything outside that range uses an exponent
    without zero padding.

    Examples:
        >>> format_number(25.0)
        '25'
        >>> format_number(0.000001)
        '0.000001'
        >>> format_number(1e-7)
        '1e-7'
    """
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"

    shortest = repr(number)
    if MIN_PLAIN_NUMBER <= abs(number) < MAX_PLAIN_INTEGER:
        return format(Decimal(shortest).normalize(), "f")

    # Outside the plain range repr always uses an exponent, e.g. '1.5e-07'
    mantissa, exponent = shortest.split("e")
    power = int(exponent)
    return f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"


@dataclass(frozen=True)
class Scalar:
    """
    A single number or string.

    Attributes:
        kind: ValueKind.NUMBER or ValueKind.STRING
        data: float for numbers, str for strings
    """
    kind: ValueKind
    data: Union[float, str]

    def __post_init__(self):
        """Reject tags that do not describe a scalar."""
        if self.kind == ValueKind.LIST:
            raise ValueError("a Scalar cannot carry the LIST kind")

    @classmethod
    def number(cls, data: float) -> "Scalar":
        """Create a numeric scalar."""
        return cls(kind=ValueKind.NUMBER, data=float(data))

    @classmethod
    def string(cls, data: str) -> "Scalar":
        """Create a string scalar."""
        return cls(kind=ValueKind.STRING, data=str(data))

    @classmethod
    def coerce(cls, literal: str) -> "Scalar":
        """
        Convert a command literal into a Scalar.

        The literal becomes a number only when the entire string parses as
        one; anything else, including padded or partially numeric text,
        stays a string.

        Examples:
            >>> Scalar.coerce("25")
            Scalar(kind=<ValueKind.NUMBER: 'number'>, data=25.0)
            >>> Scalar.coerce("25abc").kind
            <ValueKind.STRING: 'string'>
        """
        if is_number_literal(literal):
            return cls.number(float(literal))
        return cls.string(literal)

    @property
    def is_list(self) -> bool:
        return False

    def to_python(self) -> Union[float, str]:
        """Return the plain Python value."""
        return self.data

    def to_json(self) -> Any:
        """Return a JSON-ready value, collapsing integral numbers to int."""
        if self.kind == ValueKind.NUMBER:
            number = self.data
            if math.isfinite(number) and number.is_integer() and abs(number) < MAX_PLAIN_INTEGER:
                return int(number)
        return self.data

    def render(self) -> str:
        """Render the scalar as shown in confirmations and on the console."""
        if self.kind == ValueKind.NUMBER:
            return format_number(self.data)
        return self.data


@dataclass
class ListValue:
    """
    Ordered, append-only sequence of scalars stored under one key.

    Attributes:
        items: Scalars in the order they were stored
    """
    items: List[Scalar] = field(default_factory=list)

    @property
    def kind(self) -> ValueKind:
        return ValueKind.LIST

    @property
    def is_list(self) -> bool:
        return True

    def append(self, scalar: Scalar) -> None:
        """Append a scalar to the end of the list."""
        self.items.append(scalar)

    def __len__(self) -> int:
        return len(self.items)

    def to_python(self) -> List[Union[float, str]]:
        """Return the items as a plain Python list."""
        return [item.to_python() for item in self.items]

    def to_json(self) -> List[Any]:
        return [item.to_json() for item in self.items]

    def render(self) -> str:
        """
        Render the list as compact JSON, e.g. ["John Doe","Jane Smith"].

        Numbers use format_number; non-finite numbers become null.
        """
        return "[" + ",".join(_render_json_item(item) for item in self.items) + "]"


def _render_json_item(scalar: Scalar) -> str:
    if scalar.kind == ValueKind.NUMBER:
        if not math.isfinite(scalar.data):
            return "null"
        return format_number(scalar.data)
    return json.dumps(scalar.data, ensure_ascii=False)


Value = Union[Scalar, ListValue]

"""Storage module for MiniDB."""

from .store import Store
from .values import ListValue, Scalar, Value, ValueKind

__all__ = ["Store", "Scalar", "ListValue", "Value", "ValueKind"]

"""Console module for MiniDB."""

from .formatting import format_result, format_snapshot, format_value
from .repl import Shell

__all__ = ["Shell", "format_result", "format_snapshot", "format_value"]

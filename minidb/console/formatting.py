"""Console rendering for values and results."""

import json
from typing import Any, Dict, Optional

from ..protocol.commands import Result
from ..storage.values import Value


def format_value(value: Value) -> str:
    """Render a stored value: strings raw, numbers plain, lists as JSON."""
    return value.render()


def format_result(result: Result) -> Optional[str]:
    """
    Format a Result for printing.

    Returns:
        The line to print, or None for an EMPTY result.

    Examples:
        >>> format_result(Result.ok(message="Stored: age = 25"))
        'Stored: age = 25'
    """
    if result.is_empty:
        return None
    if result.is_error:
        return f"Error: {result.message}"
    if result.value is not None:
        return format_value(result.value)
    return result.message


def format_snapshot(snapshot: Dict[str, Any]) -> str:
    """Render the whole database for the show meta-command."""
    return f"Database contents: {json.dumps(snapshot, ensure_ascii=False)}"

"""
Key-Value Store Module

This module implements the in-memory storage behind the command executor.

Storing to a key that already holds a value never overwrites it: the old
scalar and the new one are collected into a list, and further stores
append to that list.
"""

import logging
from typing import Any, Dict, Optional

from .values import ListValue, Scalar, Value

logger = logging.getLogger(__name__)


class Store:
    """
    In-memory key-value store with append-on-restore semantics.

    Each executor owns its own Store; nothing is shared between instances
    and nothing is persisted.

    Operations:
    - put: Store a scalar, converting or extending the key's list
    - get: Retrieve the current value by key
    - exists: Check if a key exists

    Internal Storage:
        Plain dict (insertion ordered). Format: key -> Scalar | ListValue
    """

    def __init__(self):
        """Initialize an empty store."""
        self._store: Dict[str, Value] = {}

    def put(self, key: str, scalar: Scalar) -> Value:
        """
        Store a scalar under a key.

        Args:
            key: The key to store (case-sensitive)
            scalar: The coerced value to store

        Returns:
            The key's value after the operation: the scalar itself for a new
            key, otherwise the key's list including the new scalar.
        """
        current = self._store.get(key)

        if current is None:
            self._store[key] = scalar
            return scalar

        if current.is_list:
            current.append(scalar)
            return current

        # Second store to this key: start a list with the old scalar first
        promoted = ListValue([current, scalar])
        self._store[key] = promoted
        logger.debug(f"Key {key!r} promoted to list")
        return promoted

    def get(self, key: str) -> Optional[Value]:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up

        Returns:
            The stored value (not a copy) if found, None otherwise
        """
        return self._store.get(key)

    def exists(self, key: str) -> bool:
        """Check if a key exists."""
        return key in self._store

    def size(self) -> int:
        """Get the current number of keys in the store."""
        return len(self._store)

    def snapshot(self) -> Dict[str, Any]:
        """
        Return every entry as JSON-ready Python data.

        Integral numbers come back as int so the snapshot prints the same
        way values are echoed in confirmations.
        """
        return {key: value.to_json() for key, value in self._store.items()}

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the store.

        Returns:
            Dictionary containing:
            - total_keys: Total keys in store
            - scalar_keys: Keys holding a single value
            - list_keys: Keys holding a list
            - list_items: Total number of items across all lists
        """
        lists = [value for value in self._store.values() if value.is_list]

        return {
            "total_keys": self.size(),
            "scalar_keys": self.size() - len(lists),
            "list_keys": len(lists),
            "list_items": sum(len(value) for value in lists),
        }

"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

from typing import Callable, Iterable

import pytest

from minidb.console.repl import Shell
from minidb.protocol.executor import Executor
from minidb.protocol.parser import CommandParser
from minidb.storage.store import Store


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def store() -> Store:
    """Create a fresh, empty Store."""
    return Store()


# ============================================================================
# Protocol Fixtures
# ============================================================================

@pytest.fixture
def parser() -> CommandParser:
    """Create a CommandParser instance."""
    return CommandParser()


@pytest.fixture
def executor(store: Store) -> Executor:
    """Create an Executor that owns the store fixture."""
    return Executor(store=store)


# ============================================================================
# Console Fixtures
# ============================================================================

@pytest.fixture
def shell(executor: Executor) -> Shell:
    """Create a Shell around the executor fixture."""
    return Shell(executor=executor, prompt="> ")


@pytest.fixture
def feed_input(monkeypatch) -> Callable[[Iterable[str]], None]:
    """
    Replace input() with a scripted sequence of lines.

    Once the lines run out, input() raises EOFError like a closed stdin.

    Usage:
        def test_something(shell, feed_input):
            feed_input(["STORE a 1", "exit"])
            shell.run()
    """
    def factory(lines: Iterable[str]) -> None:
        remaining = iter(lines)

        def fake_input(prompt: str = "") -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)

    return factory


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )

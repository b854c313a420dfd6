"""
Integration Tests

End-to-end sessions through the executor, mirroring typical use.

Run with: python -m pytest tests/test_integration.py -v
"""

import pytest

from minidb.console.formatting import format_result
from minidb.protocol.errors import ErrorKind
from minidb.protocol.executor import Executor


@pytest.mark.integration
class TestEndToEnd:
    """End-to-end integration tests."""

    def test_complete_workflow(self):
        executor = Executor()

        def run(command: str) -> str:
            return format_result(executor.execute(command))

        # Store values of each kind
        assert run('STORE name "John Doe"') == "Stored: name = John Doe"
        assert run("STORE age 25") == "Stored: age = 25"
        assert run('STORE city "New York"') == "Stored: city = New York"
        assert run("STORE score 95.5") == "Stored: score = 95.5"

        # Read them back
        assert run("GET name") == "John Doe"
        assert run("GET age") == "25"
        assert run("GET city") == "New York"
        assert run("GET score") == "95.5"

        # Repeated stores collect a list
        assert run('STORE name "Jane Smith"') == 'Appended to name: ["John Doe","Jane Smith"]'
        assert run('STORE name "Bob Wilson"') == (
            'Appended to name: ["John Doe","Jane Smith","Bob Wilson"]'
        )
        assert run("GET name") == '["John Doe","Jane Smith","Bob Wilson"]'

        # Errors
        assert run("GET nonexistent") == "Error: Key not found: nonexistent"
        assert run("INVALID command") == "Error: Unknown command: INVALID"

        assert executor.store.snapshot() == {
            "name": ["John Doe", "Jane Smith", "Bob Wilson"],
            "age": 25,
            "city": "New York",
            "score": 95.5,
        }

    def test_store_then_get_returns_coerced_value(self):
        executor = Executor()
        cases = {
            "int": ("42", 42.0),
            "neg": ("-7.25", -7.25),
            "word": ("hello", "hello"),
            "mixed": ("4two", "4two"),
        }

        for key, (literal, expected) in cases.items():
            executor.execute(f"STORE {key} {literal}")
            assert executor.execute(f"GET {key}").value.to_python() == expected

    def test_errors_never_mutate(self):
        executor = Executor()
        executor.execute("STORE key 1")

        failures = ["STORE key 2 3", "STORE key", "GET", "GET key extra", "DROP key"]
        for command in failures:
            result = executor.execute(command)
            assert result.is_error
            assert result.error in (ErrorKind.ARGUMENT_COUNT, ErrorKind.UNKNOWN_COMMAND)

        assert executor.store.snapshot() == {"key": 1}

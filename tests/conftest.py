"""Global pytest fixtures for CYRUSTEST."""

from __future__ import annotations

import pytest

from cyrustest import checks
from cyrustest.adapters.registry import InMemoryTestRegistry
from cyrustest.bootstrap import reset_registry
from tests.helpers.fakes import RecordingReport


@pytest.fixture(autouse=True)
def isolated_process_registry():
    """Give every test an empty process-wide registry and default fatal handler."""
    reset_registry()
    previous = checks.set_fatal_handler(None)
    yield
    checks.set_fatal_handler(previous)
    reset_registry()


@pytest.fixture
def registry() -> InMemoryTestRegistry:
    """A fresh, explicit registry."""
    return InMemoryTestRegistry()


@pytest.fixture
def report() -> RecordingReport:
    """A report that records every call and renders the text output."""
    return RecordingReport()

"""Fixtures for end-to-end CLI tests.

Provides a CliRunner and helpers writing small test modules to a temporary
directory for the ``cyrustest`` command to load.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

# pylint: disable=redefined-outer-name


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def write_tests(tmp_path):
    """Return a function writing a named test module under tmp_path."""

    def write(filename: str, source: str) -> Path:
        path = tmp_path / filename
        path.write_text(source, encoding="utf-8")
        return path

    return write

"""Plain-text report stream."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

import click

from cyrustest.interfaces.report import Report

if TYPE_CHECKING:
    from cyrustest.domain.assertions import Diagnostic
    from cyrustest.domain.results import RunResult, TestOutcome
    from cyrustest.interfaces.registry import RegistryEntry

SEPARATOR = "-" * 24


class TextReport(Report):
    """Line-oriented report written to a text stream.

    Output layout::

        ------------------------
        Running 2 tests:
        ------------------------
        -- Math
        AddsIntegers [Passed]
        SubtractsIntegers
        Error at tests.py:12
        Expected 5 - 3 to be equal to 1.
        Got 5 - 3 = 2
        Got 1 = 1
        [Failed]
        ------------------------
        A total of 2 tests performed.
        1 tests passed.
        1 tests failed.

    Args:
        stream: Destination stream. Defaults to the current ``sys.stdout``.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """The stream written to."""
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, text: str) -> None:
        click.echo(text, file=self.stream, nl=False, color=False)

    def begin(self, total: int) -> None:
        self._write(f"{SEPARATOR}\nRunning {total} tests:\n{SEPARATOR}\n")

    def group(self, name: str) -> None:
        self._write(f"-- {name}\n")

    def test_started(self, entry: RegistryEntry) -> None:
        self._write(f"{entry.name} ")

    def diagnostic(self, diagnostic: Diagnostic) -> None:
        self._write(diagnostic.render())

    def test_finished(self, outcome: TestOutcome) -> None:
        self._write(f"{outcome.label}\n")

    def summary(self, result: RunResult) -> None:
        self._write(
            f"{SEPARATOR}\n"
            f"A total of {result.total} tests performed.\n"
            f"{result.passed} tests passed.\n"
            f"{result.failed} tests failed.\n"
        )

"""Interface for the report stream."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cyrustest.domain.assertions import Diagnostic
    from cyrustest.domain.results import RunResult, TestOutcome
    from cyrustest.interfaces.registry import RegistryEntry


class Report(abc.ABC):
    """Receives run progress in execution order.

    A run produces ``begin``, then for each entry an optional ``group``
    marker, ``test_started``, any number of ``diagnostic`` calls and
    ``test_finished``, and finally ``summary``.
    """

    @abc.abstractmethod
    def begin(self, total: int) -> None:
        """A run over ``total`` entries is starting."""

    @abc.abstractmethod
    def group(self, name: str) -> None:
        """The following entries belong to group ``name``."""

    @abc.abstractmethod
    def test_started(self, entry: RegistryEntry) -> None:
        """``entry`` is about to be set up."""

    @abc.abstractmethod
    def diagnostic(self, diagnostic: Diagnostic) -> None:
        """An assertion in the running test failed."""

    @abc.abstractmethod
    def test_finished(self, outcome: TestOutcome) -> None:
        """The running test has a final outcome."""

    @abc.abstractmethod
    def summary(self, result: RunResult) -> None:
        """The run is complete."""

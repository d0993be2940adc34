"""Run results."""

from __future__ import annotations

from dataclasses import dataclass

from cyrustest.config import EXIT_FAILURE, EXIT_SUCCESS


@dataclass(frozen=True, slots=True)
class TestOutcome:
    """Pass/fail outcome of a single registry entry."""

    __test__ = False

    group: str
    name: str
    passed: bool

    @property
    def label(self) -> str:
        """Report label, ``[Passed]`` or ``[Failed]``."""
        return "[Passed]" if self.passed else "[Failed]"


@dataclass(frozen=True, slots=True)
class RunResult:
    """Aggregate of one run, in execution order.

    Computed fresh by every run and never persisted.
    """

    outcomes: tuple[TestOutcome, ...] = ()

    @property
    def total(self) -> int:
        """Number of tests executed."""
        return len(self.outcomes)

    @property
    def failed(self) -> int:
        """Number of tests that failed."""
        return sum(1 for outcome in self.outcomes if not outcome.passed)

    @property
    def passed(self) -> int:
        """Number of tests that passed."""
        return self.total - self.failed

    @property
    def exit_code(self) -> int:
        """Process exit status: 0 when nothing failed, 1 otherwise."""
        return EXIT_SUCCESS if self.failed == 0 else EXIT_FAILURE

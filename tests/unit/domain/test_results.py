"""Unit tests for run results and the comparison table."""

import pytest

from cyrustest.domain.comparisons import COMPARISONS
from cyrustest.domain.results import RunResult, TestOutcome


def test_empty_result_succeeds():
    """Running nothing is a success."""
    result = RunResult()
    assert (result.total, result.passed, result.failed) == (0, 0, 0)
    assert result.exit_code == 0


def test_counts_and_exit_code():
    """Any failure makes the exit code non-zero."""
    result = RunResult(
        (
            TestOutcome("Math", "AddsIntegers", passed=True),
            TestOutcome("Math", "SubtractsIntegers", passed=False),
        )
    )
    assert (result.total, result.passed, result.failed) == (2, 1, 1)
    assert result.exit_code == 1


def test_outcome_labels():
    """Outcome labels match the report format."""
    assert TestOutcome("g", "n", passed=True).label == "[Passed]"
    assert TestOutcome("g", "n", passed=False).label == "[Failed]"


@pytest.mark.parametrize(
    "name, holds, fails",
    [
        ("eq", (1, 1), (1, 2)),
        ("ne", (1, 2), (1, 1)),
        ("gt", (2, 1), (1, 1)),
        ("ge", (1, 1), (0, 1)),
        ("lt", (1, 2), (2, 2)),
        ("le", (2, 2), (3, 2)),
    ],
)
def test_comparison_table(name, holds, fails):
    """Each comparison uses the natural ordering of its operands."""
    comparison = COMPARISONS[name]
    assert comparison.holds(*holds)
    assert not comparison.holds(*fails)

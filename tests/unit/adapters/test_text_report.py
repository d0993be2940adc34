"""Unit tests for the plain-text report layout."""

import io

from cyrustest.adapters.report import TextReport
from cyrustest.domain.assertions import Diagnostic
from cyrustest.domain.results import RunResult, TestOutcome
from cyrustest.interfaces.registry import RegistryEntry
from tests.helpers.fakes import BodyCase


def test_full_layout():
    """Header, group marker, test lines, diagnostics and summary in order."""
    stream = io.StringIO()
    report = TextReport(stream)
    passed = TestOutcome("Math", "Adds", passed=True)
    failed = TestOutcome("Math", "Subtracts", passed=False)

    report.begin(2)
    report.group("Math")
    report.test_started(RegistryEntry("Math", "Adds", BodyCase()))
    report.test_finished(passed)
    report.test_started(RegistryEntry("Math", "Subtracts", BodyCase()))
    report.diagnostic(Diagnostic("m.py", 3, ("Expected a to be equal to b.",)))
    report.test_finished(failed)
    report.summary(RunResult((passed, failed)))

    assert stream.getvalue() == (
        "------------------------\n"
        "Running 2 tests:\n"
        "------------------------\n"
        "-- Math\n"
        "Adds [Passed]\n"
        "Subtracts \n"
        "Error at m.py:3\n"
        "Expected a to be equal to b.\n"
        "[Failed]\n"
        "------------------------\n"
        "A total of 2 tests performed.\n"
        "1 tests passed.\n"
        "1 tests failed.\n"
    )


def test_defaults_to_current_stdout(capsys):
    """Without a stream, the report writes to whatever sys.stdout is at write time."""
    TextReport().group("G")
    assert capsys.readouterr().out == "-- G\n"

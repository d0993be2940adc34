"""Runner executing every registered test case."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cyrustest.domain.errors import TestAborted
from cyrustest.domain.results import RunResult, TestOutcome

if TYPE_CHECKING:
    from cyrustest.interfaces.registry import RegistryEntry, TestRegistry
    from cyrustest.interfaces.report import Report

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class Runner:
    """Drive each registry entry through its lifecycle and tally outcomes.

    Entries are executed one at a time, in the registry's order. For each
    entry the runner calls ``setup``, then ``do`` guarded against the abort
    signal, then ``teardown``. A test fails when ``do`` aborts or when its
    failure flag is set once ``do`` returns.

    Errors raised by ``setup`` are not caught: they end the whole run.
    Errors other than the abort signal raised by ``do`` propagate as well,
    after ``teardown`` has run.

    Args:
        registry: Source of the entries to run.
        report: Destination for progress, diagnostics and the summary.
    """

    def __init__(self, registry: TestRegistry, report: Report) -> None:
        self.registry = registry
        self.report = report

    def run(self) -> RunResult:
        """Run every registered entry.

        Returns:
            RunResult: Outcomes in execution order.
        """
        entries = self.registry.entries_in_order()
        logger.info("Running %d tests", len(entries))
        self.report.begin(len(entries))

        outcomes: list[TestOutcome] = []
        current_group: str | None = None
        for entry in entries:
            if entry.group != current_group:
                current_group = entry.group
                self.report.group(current_group)
            outcome = self._run_entry(entry)
            outcomes.append(outcome)
            self.report.test_finished(outcome)

        result = RunResult(tuple(outcomes))
        self.report.summary(result)
        logger.info(
            "%d tests performed, %d passed, %d failed",
            result.total,
            result.passed,
            result.failed,
        )
        return result

    def _run_entry(self, entry: RegistryEntry) -> TestOutcome:
        case = entry.case
        case.failed = False
        case.report = self.report
        case.group, case.name = entry.group, entry.name

        self.report.test_started(entry)
        logger.debug("Starting %s.%s", entry.group, entry.name)

        aborted = False
        try:
            case.setup()
            try:
                case.do()
            except TestAborted:
                aborted = True
                logger.debug("%s.%s aborted by a hard assertion", entry.group, entry.name)
            finally:
                case.teardown()
        finally:
            # outside a run, diagnostics go back to stdout
            case.report = None

        outcome = TestOutcome(entry.group, entry.name, passed=not (aborted or case.failed))
        logger.debug("Finished %s.%s: %s", entry.group, entry.name, outcome.label)
        return outcome

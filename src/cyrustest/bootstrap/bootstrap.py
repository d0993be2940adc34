"""Bootstrap the process-wide registry and the runner.

Registration and running are separate phases: modules register their test
cases while being imported, then a single runner reads the registry. Both
phases run on one thread, so the shared registry needs no locking.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

from cyrustest.adapters.registry import InMemoryTestRegistry
from cyrustest.adapters.report import TextReport
from cyrustest.service_layer.runner import Runner

if TYPE_CHECKING:
    from cyrustest.domain.testcase import TestCase
    from cyrustest.interfaces.registry import TestRegistry
    from cyrustest.interfaces.report import Report

_registry: InMemoryTestRegistry | None = None


def get_registry() -> InMemoryTestRegistry:
    """Return the process-wide registry, creating it on first access."""
    global _registry  # pylint: disable=global-statement
    if _registry is None:
        _registry = InMemoryTestRegistry()
    return _registry


def reset_registry() -> None:
    """Drop the process-wide registry. Intended for test isolation."""
    global _registry  # pylint: disable=global-statement
    _registry = None


def register(group: str, name: str, case: TestCase) -> None:
    """Register ``case`` in the process-wide registry."""
    get_registry().register(group, name, case)


def build_runner(
    registry: TestRegistry | None = None, report: Report | None = None
) -> Runner:
    """Build a runner, defaulting to the shared registry and a stdout report."""
    return Runner(
        registry if registry is not None else get_registry(),
        report if report is not None else TextReport(),
    )


def run_all(
    registry: TestRegistry | None = None, report: Report | None = None
) -> int:
    """Run every registered test and return the process exit code.

    Returns:
        int: 0 if every test passed, 1 otherwise.
    """
    return build_runner(registry, report).run().exit_code


def main() -> NoReturn:
    """Run every registered test and exit the process with the result."""
    raise SystemExit(run_all())

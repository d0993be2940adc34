"""CYRUSTEST

A minimal unit-test framework. Test cases register themselves into a
process-wide registry when their module is imported, a runner executes them
in deterministic group order with fixture lifecycle hooks, and assertions
either record a failure or abort the current test body.

Example:
    ```py
    from cyrustest import TestCase, test, test_f, run_all

    @test("Math")
    def adds_integers(t):
        t.expect_eq(2 + 2, 4)

    class Counter(TestCase):
        def setup(self):
            self.value = 0

    @test_f(Counter)
    def starts_at_zero(t):
        t.assert_eq(t.value, 0)

    raise SystemExit(run_all())
    ```
"""

from cyrustest.bootstrap import get_registry, main, register, reset_registry, run_all
from cyrustest.bootstrap.registration import test, test_f
from cyrustest.domain.assertions import AssertionOutcome
from cyrustest.domain.errors import TestAborted
from cyrustest.domain.testcase import TestCase

__all__ = [
    "__version__",
    "AssertionOutcome",
    "TestAborted",
    "TestCase",
    "get_registry",
    "main",
    "register",
    "reset_registry",
    "run_all",
    "test",
    "test_f",
]
__version__ = "0.1.0"

"""Assertion protocol used by test bodies.

Two families share the same predicates and the same diagnostics:

- ``expect_*`` (soft): on failure, write a diagnostic, set the test's
  failure flag and return so the body keeps running.
- ``assert_*`` (hard): on failure, do the same and then raise
  :class:`~cyrustest.domain.errors.TestAborted`, which unwinds the rest of
  the body up to the runner.

Operands are evaluated by the caller exactly once, before the assertion is
entered. The source text quoted in diagnostics is recovered from the
calling frame (see :mod:`cyrustest.domain.source`).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import TracebackType
from typing import TYPE_CHECKING, Any

import click

from .comparisons import EQ, GE, GT, LE, LT, NE, Comparison
from .errors import TestAborted
from .source import CallSite, caller_site

if TYPE_CHECKING:
    from collections.abc import Callable

    from cyrustest.interfaces.report import Report

# pylint: disable=too-many-public-methods


class AssertionOutcome(enum.Enum):
    """Result of an assertion that returned.

    A failed hard assertion does not return; it raises :class:`TestAborted`.
    """

    PASSED = "passed"
    RECORDED = "recorded"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A failed assertion as shown on the report stream.

    Attributes:
        filename: File containing the failed assertion.
        lineno: Line of the failed assertion.
        lines: Explanation lines, e.g. ``Expected x to be equal to y.``.
    """

    filename: str
    lineno: int
    lines: tuple[str, ...]

    def render(self) -> str:
        """Return the diagnostic block, starting with a blank line."""
        body = "".join(f"{line}\n" for line in self.lines)
        return f"\nError at {self.filename}:{self.lineno}\n{body}"


class ExceptionExpectation:
    """Context manager behind ``*_raises`` and ``*_no_raise``.

    Attributes:
        exception: The matching exception caught by a ``raises`` check.
        outcome: Outcome once the block has exited, else ``None``.
    """

    def __init__(
        self,
        case: Assertions,
        kind: type[BaseException],
        *,
        should_raise: bool,
        hard: bool,
        site: CallSite,
    ) -> None:
        self._case = case
        self._kind = kind
        self._should_raise = should_raise
        self._hard = hard
        self._site = site
        self.exception: BaseException | None = None
        self.outcome: AssertionOutcome | None = None

    def __enter__(self) -> ExceptionExpectation:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc_type is not None and issubclass(exc_type, TestAborted):
            # a hard assertion inside the block still ends the body
            return False
        matched = exc_type is not None and issubclass(exc_type, self._kind)
        kind_name = self._kind.__name__

        if self._should_raise:
            if matched:
                self.exception = exc
                self.outcome = AssertionOutcome.PASSED
                return True
            if exc_type is not None:
                # a different kind is not ours to judge
                return False
            self.outcome = self._case._record_failure(  # pylint: disable=protected-access
                self._site, (f"Exception {kind_name} was not thrown.",), self._hard
            )
            return False

        if not matched:
            if exc_type is None:
                self.outcome = AssertionOutcome.PASSED
            return False
        self.outcome = self._case._record_failure(  # pylint: disable=protected-access
            self._site, (f"Exception {kind_name} was thrown.",), self._hard
        )
        return True


class Assertions:
    """Mixin providing ``expect_*`` and ``assert_*`` to test cases.

    The host class supplies ``failed`` (the failure flag), ``report`` (where
    diagnostics go, or ``None`` for stdout), and ``group``/``name`` used to
    label the abort signal.
    """

    failed: bool
    report: Report | None
    group: str | None
    name: str | None

    # --- Soft assertions ---

    def expect_true(self, x: Any) -> AssertionOutcome:
        """Expect ``x`` to be truthy."""
        return self._truth(x, True, hard=False)

    def expect_false(self, x: Any) -> AssertionOutcome:
        """Expect ``x`` to be falsy."""
        return self._truth(x, False, hard=False)

    def expect_eq(self, x: Any, y: Any) -> AssertionOutcome:
        """Expect ``x == y``."""
        return self._compare(EQ, x, y, hard=False)

    def expect_ne(self, x: Any, y: Any) -> AssertionOutcome:
        """Expect ``x != y``."""
        return self._compare(NE, x, y, hard=False)

    def expect_gt(self, x: Any, y: Any) -> AssertionOutcome:
        """Expect ``x > y``."""
        return self._compare(GT, x, y, hard=False)

    def expect_ge(self, x: Any, y: Any) -> AssertionOutcome:
        """Expect ``x >= y``."""
        return self._compare(GE, x, y, hard=False)

    def expect_lt(self, x: Any, y: Any) -> AssertionOutcome:
        """Expect ``x < y``."""
        return self._compare(LT, x, y, hard=False)

    def expect_le(self, x: Any, y: Any) -> AssertionOutcome:
        """Expect ``x <= y``."""
        return self._compare(LE, x, y, hard=False)

    def expect_raises(
        self,
        kind: type[BaseException],
        func: Callable[..., Any] | None = None,
        /,
        *args: Any,
        **kwargs: Any,
    ) -> Any:
        """Expect an exception of ``kind`` to be raised.

        Used as a context manager (``with t.expect_raises(ValueError): ...``)
        or with a callable and its arguments, in which case the outcome is
        returned. Exceptions of any other kind propagate unchanged.
        """
        return self._exception(kind, func, args, kwargs, should_raise=True, hard=False)

    def expect_no_raise(
        self,
        kind: type[BaseException] = Exception,
        func: Callable[..., Any] | None = None,
        /,
        *args: Any,
        **kwargs: Any,
    ) -> Any:
        """Expect no exception of ``kind`` to be raised.

        Same calling conventions as :meth:`expect_raises`. A matching
        exception is recorded as a failure and suppressed.
        """
        return self._exception(kind, func, args, kwargs, should_raise=False, hard=False)

    # --- Hard assertions ---

    def assert_true(self, x: Any) -> AssertionOutcome:
        """Assert ``x`` is truthy, aborting the test body otherwise."""
        return self._truth(x, True, hard=True)

    def assert_false(self, x: Any) -> AssertionOutcome:
        """Assert ``x`` is falsy, aborting the test body otherwise."""
        return self._truth(x, False, hard=True)

    def assert_eq(self, x: Any, y: Any) -> AssertionOutcome:
        """Assert ``x == y``, aborting the test body otherwise."""
        return self._compare(EQ, x, y, hard=True)

    def assert_ne(self, x: Any, y: Any) -> AssertionOutcome:
        """Assert ``x != y``, aborting the test body otherwise."""
        return self._compare(NE, x, y, hard=True)

    def assert_gt(self, x: Any, y: Any) -> AssertionOutcome:
        """Assert ``x > y``, aborting the test body otherwise."""
        return self._compare(GT, x, y, hard=True)

    def assert_ge(self, x: Any, y: Any) -> AssertionOutcome:
        """Assert ``x >= y``, aborting the test body otherwise."""
        return self._compare(GE, x, y, hard=True)

    def assert_lt(self, x: Any, y: Any) -> AssertionOutcome:
        """Assert ``x < y``, aborting the test body otherwise."""
        return self._compare(LT, x, y, hard=True)

    def assert_le(self, x: Any, y: Any) -> AssertionOutcome:
        """Assert ``x <= y``, aborting the test body otherwise."""
        return self._compare(LE, x, y, hard=True)

    def assert_raises(
        self,
        kind: type[BaseException],
        func: Callable[..., Any] | None = None,
        /,
        *args: Any,
        **kwargs: Any,
    ) -> Any:
        """Hard variant of :meth:`expect_raises`."""
        return self._exception(kind, func, args, kwargs, should_raise=True, hard=True)

    def assert_no_raise(
        self,
        kind: type[BaseException] = Exception,
        func: Callable[..., Any] | None = None,
        /,
        *args: Any,
        **kwargs: Any,
    ) -> Any:
        """Hard variant of :meth:`expect_no_raise`."""
        return self._exception(kind, func, args, kwargs, should_raise=False, hard=True)

    # --- Internals ---

    def _truth(self, x: Any, expected: bool, *, hard: bool) -> AssertionOutcome:
        if bool(x) is expected:
            return AssertionOutcome.PASSED
        site = caller_site(stacklevel=2)
        text = site.text(0, repr(x))
        lines = (
            f"Expected {text} to be {'true' if expected else 'false'}.",
            f"Got {text} = {x!r}",
        )
        return self._record_failure(site, lines, hard)

    def _compare(
        self, comparison: Comparison, x: Any, y: Any, *, hard: bool
    ) -> AssertionOutcome:
        if comparison.holds(x, y):
            return AssertionOutcome.PASSED
        site = caller_site(stacklevel=2)
        x_text = site.text(0, repr(x))
        y_text = site.text(1, repr(y))
        lines = (
            comparison.describe(x_text, y_text),
            f"Got {x_text} = {x!r}",
            f"Got {y_text} = {y!r}",
        )
        return self._record_failure(site, lines, hard)

    def _exception(  # pylint: disable=too-many-arguments
        self,
        kind: type[BaseException],
        func: Callable[..., Any] | None,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
        *,
        should_raise: bool,
        hard: bool,
    ) -> Any:
        if not (isinstance(kind, type) and issubclass(kind, BaseException)):
            raise TypeError(f"expected an exception type, got {kind!r}")
        expectation = ExceptionExpectation(
            self,
            kind,
            should_raise=should_raise,
            hard=hard,
            site=caller_site(stacklevel=2, arguments=False),
        )
        if func is None:
            return expectation
        with expectation:
            func(*args, **kwargs)
        return expectation.outcome

    def _record_failure(
        self, site: CallSite, lines: tuple[str, ...], hard: bool
    ) -> AssertionOutcome:
        self.failed = True
        self._emit(Diagnostic(site.filename, site.lineno, lines))
        if hard:
            raise TestAborted(self.group, self.name)
        return AssertionOutcome.RECORDED

    def _emit(self, diagnostic: Diagnostic) -> None:
        if self.report is None:
            click.echo(diagnostic.render(), nl=False)
        else:
            self.report.diagnostic(diagnostic)

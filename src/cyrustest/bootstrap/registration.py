"""Decorators registering plain functions as test cases.

``@test(group)`` turns ``fn(t)`` into a test case whose body calls
``fn(self)``; ``@test_f(Fixture)`` does the same on top of a fixture class
and uses the fixture's class name as the group. Both register the new case
immediately and hand back the original function.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from cyrustest.domain.testcase import TestCase

from .bootstrap import get_registry

if TYPE_CHECKING:
    from cyrustest.interfaces.registry import TestRegistry

F = TypeVar("F", bound=Callable[..., Any])


def _case_class(base: type[TestCase], name: str, fn: Callable[[Any], Any]) -> type[TestCase]:
    def do(self: TestCase) -> None:
        fn(self)

    functools.update_wrapper(do, fn)
    return type(base)(name, (base,), {"do": do, "__module__": fn.__module__})


def test(
    group: str, *, name: str | None = None, registry: TestRegistry | None = None
) -> Callable[[F], F]:
    """Register the decorated function as a test in ``group``.

    Args:
        group: Group name, used for ordering and report sections.
        name: Test name. Defaults to the function's name.
        registry: Registry to use. Defaults to the process-wide one.

    Example:
        ```py
        @test("Math")
        def adds_integers(t):
            t.expect_eq(2 + 2, 4)
        ```
    """

    def decorator(fn: F) -> F:
        test_name = name or fn.__name__
        case = _case_class(TestCase, test_name, fn)()
        (registry if registry is not None else get_registry()).register(
            group, test_name, case
        )
        return fn

    return decorator


def test_f(
    fixture: type[TestCase],
    *,
    name: str | None = None,
    registry: TestRegistry | None = None,
) -> Callable[[F], F]:
    """Register the decorated function as a test using ``fixture``.

    The fixture's ``setup`` and ``teardown`` wrap the body, which receives
    the fixture instance. The group is the fixture's class name.
    """

    def decorator(fn: F) -> F:
        test_name = name or fn.__name__
        case = _case_class(fixture, test_name, fn)()
        (registry if registry is not None else get_registry()).register(
            fixture.__name__, test_name, case
        )
        return fn

    return decorator


test.__test__ = False  # type: ignore[attr-defined]
test_f.__test__ = False  # type: ignore[attr-defined]

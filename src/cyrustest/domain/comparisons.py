"""Comparison table shared by assertions and invariant checks."""

import operator
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Comparison:
    """A binary predicate and the phrase used to describe it.

    Attributes:
        name: Short name used in method names (``eq`` -> ``expect_eq``).
        op: The predicate applied as ``op(x, y)``.
        relation: Phrase completing "Expected x to be ... y.".
    """

    name: str
    op: Callable[[Any, Any], Any]
    relation: str

    def holds(self, x: Any, y: Any) -> bool:
        """Return True if ``x <op> y`` is truthy."""
        return bool(self.op(x, y))

    def describe(self, x_text: str, y_text: str) -> str:
        """Return the expectation sentence for a failed comparison."""
        return f"Expected {x_text} to be {self.relation} {y_text}."


EQ = Comparison("eq", operator.eq, "equal to")
NE = Comparison("ne", operator.ne, "different from")
GT = Comparison("gt", operator.gt, "greater than")
GE = Comparison("ge", operator.ge, "greater or equal to")
LT = Comparison("lt", operator.lt, "less than")
LE = Comparison("le", operator.le, "less or equal to")

COMPARISONS: dict[str, Comparison] = {c.name: c for c in (EQ, NE, GT, GE, LT, LE)}

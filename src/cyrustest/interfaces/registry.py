"""Interface for the test registry."""

from __future__ import annotations

import abc
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cyrustest.domain.testcase import TestCase


@dataclass(frozen=True, slots=True)
class RegistryEntry:
    """A registered test case.

    The registry holds a reference only; the case itself is owned by the
    module that created it.
    """

    group: str
    name: str
    case: TestCase


class TestRegistry(abc.ABC):
    """Contract for a store of test cases keyed by group.

    Ordering contract for :meth:`entries_in_order`:

    - entries are contiguous by group;
    - groups appear in ascending lexicographic order of their names;
    - within a group, entries appear in registration order.

    The order is a pure function of the registration history. Duplicate
    ``(group, name)`` pairs are accepted and kept as separate entries.
    """

    __test__ = False  # not a pytest test class

    @abc.abstractmethod
    def register(self, group: str, name: str, case: TestCase) -> None:
        """Append ``case`` under ``group`` as ``name``. Never fails."""

    @abc.abstractmethod
    def entries_in_order(self) -> list[RegistryEntry]:
        """Return every entry in group order, then registration order."""

    @abc.abstractmethod
    def __len__(self) -> int:
        """Return the number of registered entries."""

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(self.entries_in_order())

    @property
    def groups(self) -> list[str]:
        """Group names in report order."""
        seen: list[str] = []
        for entry in self.entries_in_order():
            if not seen or seen[-1] != entry.group:
                seen.append(entry.group)
        return seen

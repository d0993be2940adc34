"""In-memory test registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cyrustest.interfaces.registry import RegistryEntry, TestRegistry

if TYPE_CHECKING:
    from cyrustest.domain.testcase import TestCase

logger = logging.getLogger(__name__)


class InMemoryTestRegistry(TestRegistry):
    """Registry backed by one list of entries per group.

    Each group keeps its own list in registration order, so stability within
    a group never depends on a container's handling of equal keys. Groups
    are sorted by name on read.
    """

    def __init__(self) -> None:
        self._groups: dict[str, list[RegistryEntry]] = {}
        self._count = 0

    def register(self, group: str, name: str, case: TestCase) -> None:
        entries = self._groups.setdefault(group, [])
        if any(entry.name == name for entry in entries):
            logger.warning("Test %s.%s is registered more than once.", group, name)
        entries.append(RegistryEntry(group=group, name=name, case=case))
        self._count += 1
        logger.debug("Found %s.", name)

    def entries_in_order(self) -> list[RegistryEntry]:
        return [entry for group in sorted(self._groups) for entry in self._groups[group]]

    def __len__(self) -> int:
        return self._count

    def clear(self) -> None:
        """Forget every entry."""
        self._groups.clear()
        self._count = 0

"""Ports of CYRUSTEST.

Abstract contracts the runner depends on: the test registry and the report
stream. Concrete implementations live in :mod:`cyrustest.adapters`.
"""

from .registry import RegistryEntry, TestRegistry
from .report import Report

__all__ = ["RegistryEntry", "Report", "TestRegistry"]

"""Adapters for CYRUSTEST.

Concrete implementations of the ports in :mod:`cyrustest.interfaces`: an
in-memory registry and a plain-text report stream.
"""

from .registry import InMemoryTestRegistry
from .report import TextReport

__all__ = ["InMemoryTestRegistry", "TextReport"]

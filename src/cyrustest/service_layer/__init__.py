"""Service layer for CYRUSTEST.

Application services driving the domain: the runner that executes the
registry and the discovery step that imports test modules so they register.
"""

from .discovery import DiscoveryError, load_targets
from .runner import Runner

__all__ = ["DiscoveryError", "Runner", "load_targets"]

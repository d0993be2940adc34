"""Process-wide wiring: the shared registry and the run entry points."""

from .bootstrap import build_runner, get_registry, main, register, reset_registry, run_all

__all__ = [
    "build_runner",
    "get_registry",
    "main",
    "register",
    "reset_registry",
    "run_all",
]

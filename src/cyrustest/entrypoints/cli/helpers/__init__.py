"""CLI helpers for CYRUSTEST.

Utilities used by the command-line interface: logger-level option parsing and
message emitters that write to stderr with emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["error", "parse_log_level", "success", "warn"]

"""Configuration utilities for CYRUSTEST.

This module centralizes small helpers and constants related to application configuration.
"""

import os
import re
from pathlib import Path

from platformdirs import user_log_dir

EXIT_SUCCESS = 0  # pragma: no mutate
EXIT_FAILURE = 1  # pragma: no mutate
EXIT_USAGE = 2  # pragma: no mutate

TARGETS_ENV_VAR = "CYRUSTEST_TARGETS"  # pragma: no mutate


class TargetsNotSetError(Exception):
    """Raised when no targets were given and CYRUSTEST_TARGETS is not set."""

    def __init__(self) -> None:
        super().__init__(
            f"No test targets given. Pass modules, files or directories, "
            f"or set {TARGETS_ENV_VAR}."
        )


def get_targets() -> list[str]:
    """Get the default test targets from the environment.

    Returns:
        The comma/space separated items of the `CYRUSTEST_TARGETS` environment variable.

    Raises:
        TargetsNotSetError: If `CYRUSTEST_TARGETS` is not set or empty.
    """
    if not (value := os.environ.get(TARGETS_ENV_VAR, "").strip()):
        raise TargetsNotSetError
    return [item for item in re.split(r"[,\s]+", value) if item]


def default_log_path() -> Path:
    """Return the default flight-recorder file, creating its directory.

    Returns:
        ``latest.log`` inside the per-user log directory for cyrustest.
    """
    return Path(user_log_dir("cyrustest", appauthor=False, ensure_exists=True)) / "latest.log"

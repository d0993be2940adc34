"""Logging setup for ``cyrustest`` runs.

The report owns stdout, so every log record goes to stderr through Rich.
A run can also keep a flight recorder: an in-memory buffer of DEBUG
records, including each test's start and outcome, written to a file when
a warning shows up or, with ``force_flush``, when the CLI exits.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_LEVEL = logging.WARNING
RECORDER_FORMAT = "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"


def verbosity_level(verbose: int = 0, quiet: int = 0) -> int:
    """Console level after ``-v``/``-q``: one step from WARNING per flag, clamped.

    >>> verbosity_level(verbose=1)
    20
    """
    level = DEFAULT_LEVEL - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


@dataclass(frozen=True, slots=True)
class LogSettings:
    """How a run logs.

    Attributes:
        level: Console level; DEBUG when ``debug`` is set.
        debug: Show timestamps, logger names and source paths on the console.
        color: Allow Rich to color the console output.
        recorder_path: Flight recorder file, or ``None`` for no recorder.
        recorder_capacity: Records kept in memory before a forced write.
        force_flush: Write the recorder buffer when logging shuts down.
        logger_levels: Per-logger minimum levels, e.g. ``{"asyncio": 30}``.
    """

    level: int = DEFAULT_LEVEL
    debug: bool = False
    color: bool = True
    recorder_path: Path | None = None
    recorder_capacity: int = 2000
    force_flush: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        return logging.DEBUG if self.debug else self.level


def console_handler(settings: LogSettings) -> RichHandler:
    """Rich handler on stderr, honouring ``--color/--no-color``."""
    handler = RichHandler(
        level=settings.console_level,
        console=Console(color_system="auto" if settings.color else None, stderr=True),
        rich_tracebacks=True,
        show_time=settings.debug,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    fmt = "%(name)s: %(message)s" if settings.debug else "%(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def flight_recorder(settings: LogSettings) -> MemoryHandler | None:
    """Buffering handler in front of ``settings.recorder_path``, if one is set.

    The file is opened on the first flush, so runs without warnings leave no
    file behind unless ``force_flush`` is on.
    """
    if settings.recorder_path is None:
        return None
    target = logging.FileHandler(
        settings.recorder_path, mode="w", encoding="utf-8", delay=True
    )
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=settings.recorder_capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=settings.force_flush,
    )


def configure(settings: LogSettings) -> list[logging.Handler]:
    """Replace the root handlers with the console and recorder handlers.

    The root logger passes everything; each handler applies its own level.

    Returns:
        list[logging.Handler]: The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [console_handler(settings)]
    recorder = flight_recorder(settings)
    if recorder is not None:
        handlers.append(recorder)

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_settings(logger: logging.Logger, settings: LogSettings, app_version: str) -> None:
    """Log where this run's log records go."""
    logger.info(
        "cyrustest %s: console=%s, flight recorder=%s",
        app_version,
        logging.getLevelName(settings.console_level),
        settings.recorder_path or "off",
    )
    for name, level in settings.logger_levels.items():
        logger.debug("Logger %s set to %s", name, logging.getLevelName(level))

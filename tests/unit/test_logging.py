"""Unit tests for the run's logging setup."""

import logging
from logging.handlers import MemoryHandler

import pytest
from rich.logging import RichHandler

from cyrustest.logging import (
    LogSettings,
    console_handler,
    flight_recorder,
    log_settings,
    verbosity_level,
)


@pytest.mark.parametrize(
    "verbose, quiet, expected",
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (5, 0, logging.DEBUG),
        (0, 1, logging.ERROR),
        (0, 9, logging.CRITICAL),
        (1, 1, logging.WARNING),
    ],
)
def test_verbosity_level(verbose, quiet, expected):
    """Each -v/-q moves one level from WARNING, clamped to DEBUG..CRITICAL."""
    assert verbosity_level(verbose, quiet) == expected


def test_console_handler_uses_settings_level():
    """The console handler filters at the configured level."""
    handler = console_handler(LogSettings(level=logging.ERROR))
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.ERROR


def test_debug_forces_console_to_debug():
    """Debug mode shows everything, whatever the verbosity."""
    settings = LogSettings(level=logging.ERROR, debug=True)
    assert settings.console_level == logging.DEBUG
    assert console_handler(settings).level == logging.DEBUG


def test_no_recorder_without_path():
    """Without a recorder path there is no flight recorder."""
    assert flight_recorder(LogSettings()) is None


def test_recorder_writes_only_on_flush(tmp_path):
    """Records stay in memory until a WARNING arrives."""
    path = tmp_path / "run.log"
    recorder = flight_recorder(LogSettings(recorder_path=path, recorder_capacity=10))
    assert isinstance(recorder, MemoryHandler)

    record = logging.LogRecord(
        "cyrustest.test", logging.DEBUG, __file__, 1, "Starting G.t", None, None
    )
    recorder.handle(record)
    assert not path.exists()

    warning = logging.LogRecord(
        "cyrustest.test", logging.WARNING, __file__, 2, "dup", None, None
    )
    recorder.handle(warning)
    target = recorder.target
    recorder.close()
    target.close()
    text = path.read_text(encoding="utf-8")
    assert "DEBUG cyrustest.test:1: Starting G.t" in text
    assert "WARNING cyrustest.test:2: dup" in text


def test_log_settings_reports_recorder_and_overrides(tmp_path, caplog):
    """The startup line names the console level and the recorder file."""
    logger = logging.getLogger("cyrustest.entrypoints.cli.main")
    settings = LogSettings(
        level=logging.INFO,
        recorder_path=tmp_path / "run.log",
        logger_levels={"asyncio": logging.ERROR},
    )
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        log_settings(logger, settings, "9.9")
    assert caplog.messages == [
        f"cyrustest 9.9: console=INFO, flight recorder={tmp_path / 'run.log'}",
        "Logger asyncio set to ERROR",
    ]


def test_log_settings_without_recorder(caplog):
    """Without a recorder the startup line says so."""
    logger = logging.getLogger("cyrustest.entrypoints.cli.main")
    with caplog.at_level(logging.INFO, logger=logger.name):
        log_settings(logger, LogSettings(), "9.9")
    assert caplog.messages == ["cyrustest 9.9: console=WARNING, flight recorder=off"]

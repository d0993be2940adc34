"""CYRUSTEST CLI entry point.

Defines the top-level ``cyrustest`` command (via Click-Extra) and registers
its subcommands.

Currently available commands
- ``cyrustest run``: import test targets and run every registered test.
- ``cyrustest list``: import test targets and list the registered tests.

Notes
- The CLI version is sourced from `cyrustest.__version__` and displayed
  automatically by Click-Extra (``--version``).
- The test report goes to stdout; logging and status lines go to stderr.

Examples
    $ cyrustest --version
    $ cyrustest run tests/
    $ cyrustest -v list mypkg.tests.test_math
"""

import logging
from pathlib import Path

import click
import click_extra as clickx

from cyrustest import __version__
from cyrustest.config import default_log_path
from cyrustest.logging import LogSettings, configure, log_settings, verbosity_level

from .commands import list_cmd, run_cmd
from .helpers.log_level_parser import parse_log_level

logger = logging.getLogger(__name__)


HELP = """CYRUSTEST command-line interface.

    CYRUSTEST is a minimal unit-test framework. Test modules register their
    cases on import; the runner executes them group by group, in a fixed
    order, and exits non-zero if any test failed.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=None,
    envvar="CYRUSTEST_LOG_PATH",
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="CYRUSTEST_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "at DEBUG granularity (unaffected by -v/-q) and writes them to "
        "--log-path when a WARNING/ERROR occurs, or on exit if --force-flush "
        "is set. Console verbosity is unchanged."
    ),
    default=False,
    envvar="CYRUSTEST_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    envvar="CYRUSTEST_FORCE_FLUSH",
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight-recorder. Repeatable (e.g. -L asyncio=DEBUG) or via "
        "CYRUSTEST_LOGGER_LEVELS (comma/space list)."
    ),
    envvar="CYRUSTEST_LOGGER_LEVELS",
    show_envvar=True,
)
@clickx.pass_context
def cyrustest(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path | None,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """CYRUSTEST command-line interface."""
    settings = LogSettings(
        level=verbosity_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,  # None or True => allow color
        recorder_path=(log_path or default_log_path()) if flight_recorder else None,
        recorder_capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    configure(settings)
    log_settings(logger, settings, __version__)

    ctx.call_on_close(logging.shutdown)


cyrustest.add_command(run_cmd)
cyrustest.add_command(list_cmd)

"""``cyrustest run`` and ``cyrustest list``.

Both commands first import their targets, which registers the test cases
those modules define, then read the process-wide registry.
"""

import logging

import click

from cyrustest import config
from cyrustest.bootstrap import build_runner, get_registry
from cyrustest.service_layer.discovery import DiscoveryError, load_targets

from .helpers import error, success, warn

logger = logging.getLogger(__name__)


def _load(targets: tuple[str, ...]) -> None:
    """Import targets (or the configured defaults), exiting with status 2 on failure."""
    try:
        names = list(targets) or config.get_targets()
        modules = load_targets(names)
    except (DiscoveryError, config.TargetsNotSetError) as e:
        logger.debug("Loading targets failed", exc_info=True)
        error(str(e))
        raise SystemExit(config.EXIT_USAGE) from e

    registry = get_registry()
    logger.info(
        "Loaded %d tests in %d groups from %d modules (%s)",
        len(registry),
        len(registry.groups),
        len(modules),
        ", ".join(names),
    )


@click.command(name="run")
@click.argument("targets", nargs=-1)
def run_cmd(targets: tuple[str, ...]) -> None:
    """Import TARGETS and run every registered test.

    TARGETS are module names, .py files or directories; without any, the
    comma/space separated list in CYRUSTEST_TARGETS is used.

    \b
    Exit status:
      0  every test passed
      1  at least one test failed
      2  targets could not be loaded
    """
    _load(targets)
    registry = get_registry()
    if len(registry) == 0:
        warn("No tests were registered.")

    result = build_runner(registry).run()
    if result.exit_code == config.EXIT_SUCCESS:
        success(f"{result.passed} of {result.total} tests passed.")
    else:
        error(f"{result.failed} of {result.total} tests failed.")
    raise SystemExit(result.exit_code)


@click.command(name="list")
@click.argument("targets", nargs=-1)
def list_cmd(targets: tuple[str, ...]) -> None:
    """Import TARGETS and print every registered test in run order.

    Takes the same TARGETS as `run`.
    """
    _load(targets)
    for entry in get_registry().entries_in_order():
        click.echo(f"{entry.group}.{entry.name}")


"""Allow ``python -m cyrustest``."""

from cyrustest.entrypoints.cli.main import cyrustest

cyrustest()  # pylint: disable=no-value-for-parameter

"""Invariant checks for host programs.

These are not test assertions. A failed check means the program itself is
in a state it cannot continue from, so it goes to :func:`fatal`, which never
returns. The runner never calls into this module; test failures are
reported through :mod:`cyrustest.domain.assertions` instead.

Example:
    ```py
    from cyrustest import checks

    checks.check_ge(len(buffer), header_size)
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, NoReturn

from cyrustest.domain.comparisons import EQ, GE, GT, LE, LT, NE, Comparison
from cyrustest.domain.errors import FatalCheckError
from cyrustest.domain.source import caller_site

logger = logging.getLogger(__name__)

FatalHandler = Callable[[str], Any]


def _raise_fatal(message: str) -> NoReturn:
    raise FatalCheckError(message)


_fatal_handler: FatalHandler = _raise_fatal


def set_fatal_handler(handler: FatalHandler | None) -> FatalHandler:
    """Install the handler :func:`fatal` delegates to.

    Args:
        handler: Called with the message. Passing ``None`` restores the
            default, which raises :class:`FatalCheckError`.

    Returns:
        The previously installed handler.
    """
    global _fatal_handler  # pylint: disable=global-statement
    previous = _fatal_handler
    _fatal_handler = handler if handler is not None else _raise_fatal
    return previous


def fatal(message: str) -> NoReturn:
    """Log ``message`` at CRITICAL and abort through the fatal handler.

    Raises:
        FatalCheckError: With the default handler, or if an installed
            handler returns.
    """
    logger.critical(message)
    _fatal_handler(message)
    raise FatalCheckError(message)


def check(x: Any) -> None:
    """Alias of :func:`check_true`."""
    _check_truth(x, True)


def check_true(x: Any) -> None:
    """Abort unless ``x`` is truthy."""
    _check_truth(x, True)


def check_false(x: Any) -> None:
    """Abort unless ``x`` is falsy."""
    _check_truth(x, False)


def check_eq(x: Any, y: Any) -> None:
    """Abort unless ``x == y``."""
    _check_pair(EQ, x, y)


def check_ne(x: Any, y: Any) -> None:
    """Abort unless ``x != y``."""
    _check_pair(NE, x, y)


def check_gt(x: Any, y: Any) -> None:
    """Abort unless ``x > y``."""
    _check_pair(GT, x, y)


def check_ge(x: Any, y: Any) -> None:
    """Abort unless ``x >= y``."""
    _check_pair(GE, x, y)


def check_lt(x: Any, y: Any) -> None:
    """Abort unless ``x < y``."""
    _check_pair(LT, x, y)


def check_le(x: Any, y: Any) -> None:
    """Abort unless ``x <= y``."""
    _check_pair(LE, x, y)


def _check_truth(x: Any, expected: bool) -> None:
    if bool(x) is expected:
        return
    site = caller_site(stacklevel=2)
    text = site.text(0, repr(x))
    fatal(
        f"Check failed at {site.filename}:{site.lineno}\n"
        f"Expected {text} to be {'true' if expected else 'false'}.\n"
        f"Got {text} = {x!r}"
    )


def _check_pair(comparison: Comparison, x: Any, y: Any) -> None:
    if comparison.holds(x, y):
        return
    site = caller_site(stacklevel=2)
    x_text = site.text(0, repr(x))
    y_text = site.text(1, repr(y))
    fatal(
        f"Check failed at {site.filename}:{site.lineno}\n"
        f"{comparison.describe(x_text, y_text)}\n"
        f"Got {x_text} = {x!r}\n"
        f"Got {y_text} = {y!r}"
    )

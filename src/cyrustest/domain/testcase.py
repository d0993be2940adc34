"""Test case lifecycle."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from .assertions import Assertions

if TYPE_CHECKING:
    from cyrustest.interfaces.report import Report


class TestCase(Assertions, abc.ABC):
    """A unit of executable behavior with fixture hooks.

    Subclasses implement :meth:`do` and may override :meth:`setup` and
    :meth:`teardown` to share environment preparation between several test
    bodies (a fixture). The runner drives each registered instance through
    ``setup -> do -> teardown`` and reads :attr:`failed` afterwards.

    Attributes:
        failed: Set by any failed assertion; reset by the runner before setup.
        report: Where assertion diagnostics are written while running.
        group: Group the case was registered under, if any.
        name: Name the case was registered under, if any.
    """

    __test__ = False  # not a pytest test class

    def __init__(self) -> None:
        self.failed = False
        self.report: Report | None = None
        self.group: str | None = None
        self.name: str | None = None

    def setup(self) -> None:
        """Prepare the environment. Runs right before :meth:`do`."""

    @abc.abstractmethod
    def do(self) -> None:
        """The test body."""

    def teardown(self) -> None:
        """Release the environment. Runs after :meth:`do` returns or aborts."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.group}.{self.name} failed={self.failed}>"

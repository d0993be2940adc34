"""Domain-layer error definitions."""

# ============================================================================
#                           General errors
# ============================================================================


class CyrusTestError(Exception):
    """Base class for framework errors."""


class FatalCheckError(CyrusTestError):
    """Raised by the default fatal handler when an invariant check fails."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# ============================================================================
#                           Control flow
# ============================================================================


class TestAborted(BaseException):
    """Abort signal raised by a failing hard assertion.

    Unwinds the remainder of a test body up to the runner, which catches it
    at the per-test boundary. It derives from ``BaseException`` so a test
    body catching ``Exception`` cannot swallow it.
    """

    __test__ = False  # keep pytest from collecting this class

    def __init__(self, group: str | None = None, name: str | None = None) -> None:
        super().__init__(f"Test {group}.{name} aborted")
        self.group = group
        self.name = name

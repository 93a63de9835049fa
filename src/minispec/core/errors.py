"""Exceptions raised by the minispec harness."""


class MinispecError(Exception):
    """Base class for harness errors."""


class UsageError(MinispecError):
    """Raised when the declaration API is used incorrectly.

    Examples are declaring a test outside a suite, nesting suites, or
    declaring suites after a run has started. These are programming
    mistakes in the test file, not test failures, so the runner never
    catches them.
    """

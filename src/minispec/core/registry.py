"""
Suite registry.

Holds the declared suites in order and tracks which suite, if any, is
currently being populated by a ``describe`` body.
"""

import enum
import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from minispec.core.errors import UsageError
from minispec.core.test_case import TestAction, TestCase, TestSuite

logger = logging.getLogger(__name__)


class RegistryState(enum.Enum):
    IDLE = "idle"
    DECLARING = "declaring"


class Registry:
    """Ordered store of suites with a single open-suite slot.

    Tests can only be added while a suite is open. Opening is scoped by
    :meth:`open_suite`, which always closes the suite again, even when
    the body declaring its tests raises. Once sealed (a run has started)
    no further suites may be opened until :meth:`reset` is called.
    """

    def __init__(self):
        self._suites: list = []
        self._current: Optional[TestSuite] = None
        self._sealed = False

    @property
    def suites(self) -> Tuple[TestSuite, ...]:
        return tuple(self._suites)

    @property
    def state(self) -> RegistryState:
        if self._current is None:
            return RegistryState.IDLE
        return RegistryState.DECLARING

    @property
    def current_suite(self) -> Optional[TestSuite]:
        return self._current

    @property
    def sealed(self) -> bool:
        return self._sealed

    @contextmanager
    def open_suite(self, name: str) -> Iterator[TestSuite]:
        """Register a new suite and keep it open for the ``with`` block.

        Args:
            name: Suite name.

        Yields:
            The newly registered suite.

        Raises:
            UsageError: If another suite is open or the registry is sealed.
        """
        if self._sealed:
            raise UsageError(f"suite {name!r} declared after the run started")
        if self._current is not None:
            raise UsageError(
                f"suite {name!r} declared inside suite {self._current.name!r}; "
                "nested suites are not supported"
            )

        suite = TestSuite(name)
        self._suites.append(suite)
        self._current = suite
        logger.debug("Opened suite %r", name)
        try:
            yield suite
        finally:
            self._current = None
            logger.debug("Closed suite %r with %d test(s)", name, len(suite))

    def add_test(self, name: str, action: TestAction) -> TestCase:
        """Append a test case to the open suite.

        Raises:
            UsageError: If no suite is open.
        """
        if self._current is None:
            raise UsageError(f"test {name!r} declared outside a suite")
        if not callable(action):
            raise TypeError(f"test {name!r} action must be callable, got {action!r}")

        test_case = TestCase(name, action)
        self._current.add_test(test_case)
        logger.debug("Registered test %r in suite %r", name, self._current.name)
        return test_case

    def seal(self) -> None:
        self._sealed = True

    def reset(self) -> None:
        """Drop all suites and unseal the registry.

        Raises:
            UsageError: If called while a suite is being declared.
        """
        if self._current is not None:
            raise UsageError(
                f"cannot reset while suite {self._current.name!r} is being declared"
            )
        self._suites.clear()
        self._sealed = False

    def __len__(self) -> int:
        return len(self._suites)

"""
Declaration API bound to an explicit registry.

A :class:`Harness` owns one registry and one runner. The package-level
``describe``/``test``/``run`` functions delegate to a process-default
harness; tests of the harness itself create their own instances.
"""

import asyncio
import logging
import sys
from typing import Callable, Optional

from minispec.core.errors import UsageError
from minispec.core.registry import Registry, RegistryState
from minispec.core.test_case import RunnerConfig, RunSummary, TestAction
from minispec.core.test_runner import TestRunner
from minispec.core.validators import Expectation, expect

logger = logging.getLogger(__name__)


class Harness:
    """Declare-then-run test harness."""

    def __init__(
        self,
        config: Optional[RunnerConfig] = None,
        config_factory: Callable[[], RunnerConfig] = RunnerConfig,
    ):
        """Initialize harness.

        Args:
            config: Run configuration. If None, ``config_factory`` builds
                one the first time the configuration is needed.
            config_factory: Zero-argument callable returning a RunnerConfig.
        """
        self._config = config
        self._config_factory = config_factory
        self._runner: Optional[TestRunner] = None
        self.registry = Registry()

    @property
    def config(self) -> RunnerConfig:
        if self._config is None:
            self._config = self._config_factory()
        return self._config

    @property
    def runner(self) -> TestRunner:
        if self._runner is None:
            self._runner = TestRunner(self.config)
        return self._runner

    def describe(self, name: str, body: Optional[Callable[[], None]] = None):
        """Declare a suite and run ``body`` to collect its tests.

        Without ``body``, returns a decorator that declares the suite
        from the decorated function and hands the function back.
        """
        if body is None:
            def decorator(fn: Callable[[], None]) -> Callable[[], None]:
                self.describe(name, fn)
                return fn
            return decorator

        with self.registry.open_suite(name):
            body()
        return None

    def test(self, name: str, action: Optional[TestAction] = None):
        """Register a test in the suite currently being declared.

        Without ``action``, returns a decorator that registers the
        decorated function and hands it back.
        """
        if action is None:
            def decorator(fn: TestAction) -> TestAction:
                self.registry.add_test(name, fn)
                return fn
            return decorator

        self.registry.add_test(name, action)
        return None

    # BDD-style alias
    it = test

    @staticmethod
    def expect(value) -> Expectation:
        return expect(value)

    def _start(self) -> None:
        if self.registry.state is RegistryState.DECLARING:
            raise UsageError("run() called while a suite is being declared")
        if self.registry.sealed:
            raise UsageError("run() already called; call reset() before running again")
        self.registry.seal()
        logger.debug("Starting run of %d suite(s)", len(self.registry))

    def _finish(self, summary: RunSummary) -> RunSummary:
        if not summary.success and self.config.exit_on_failure:
            sys.exit(self.config.failure_exit_code)
        return summary

    def run(self) -> RunSummary:
        """Run every declared suite and report the results.

        Exits the process with ``config.failure_exit_code`` if any test
        failed and ``config.exit_on_failure`` is set.

        Returns:
            RunSummary of the run.

        Raises:
            UsageError: If the harness already ran without a reset, or if
                called from a running event loop (use :meth:`run_async`).
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            raise UsageError("run() called from a running event loop; await run_async() instead")

        runner = self.runner
        self._start()
        summary = runner.run_all(self.registry.suites)
        return self._finish(summary)

    async def run_async(self) -> RunSummary:
        """Same as :meth:`run`, for callers already inside an event loop."""
        runner = self.runner
        self._start()
        summary = await runner.run_all_async(self.registry.suites)
        return self._finish(summary)

    def reset(self) -> None:
        """Forget all declared suites so a new declare-then-run cycle can start."""
        self.registry.reset()

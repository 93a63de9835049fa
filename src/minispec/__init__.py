"""
minispec

Minimal describe/test/expect unit-testing harness with sync and async tests.
"""

import logging

from minispec.core.errors import MinispecError, UsageError
from minispec.core.registry import Registry, RegistryState
from minispec.core.test_case import (
    RunnerConfig,
    RunSummary,
    TestCase,
    TestResult,
    TestSuite,
)
from minispec.core.test_runner import TestRunner
from minispec.core.validators import Expectation, expect, same_value
from minispec.harness import Harness

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Process-default harness behind the module-level API; its config is read
# from the environment on first use
default_harness = Harness(config_factory=RunnerConfig.from_env)

describe = default_harness.describe
test = default_harness.test
it = default_harness.it
run = default_harness.run
run_async = default_harness.run_async
reset = default_harness.reset

__version__ = "0.1.0"
__all__ = [
    # Declaration API
    "describe",
    "test",
    "it",
    "expect",
    "run",
    "run_async",
    "reset",
    "default_harness",
    # Core
    "Harness",
    "Registry",
    "RegistryState",
    "RunnerConfig",
    "RunSummary",
    "TestCase",
    "TestResult",
    "TestSuite",
    "TestRunner",
    "Expectation",
    "same_value",
    # Errors
    "MinispecError",
    "UsageError",
]

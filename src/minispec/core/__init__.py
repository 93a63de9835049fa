"""Core module for test case definitions and execution."""

from minispec.core.errors import MinispecError, UsageError
from minispec.core.registry import Registry, RegistryState
from minispec.core.test_case import RunnerConfig, RunSummary, TestCase, TestResult, TestSuite
from minispec.core.test_runner import TestRunner
from minispec.core.validators import Expectation, expect, same_value

__all__ = [
    "MinispecError",
    "UsageError",
    "Registry",
    "RegistryState",
    "RunnerConfig",
    "RunSummary",
    "TestCase",
    "TestResult",
    "TestSuite",
    "TestRunner",
    "Expectation",
    "expect",
    "same_value",
]

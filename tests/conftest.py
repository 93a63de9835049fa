"""
pytest configuration and fixtures for the minispec harness.
"""

import io
import sys
from pathlib import Path

import pytest

# Add src to path
_SRC_PATH = Path(__file__).parent.parent / "src"
if str(_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(_SRC_PATH))

from minispec.core.test_case import RunnerConfig
from minispec.harness import Harness


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--failure-exit-code",
        action="store",
        default=1,
        type=int,
        help="Exit status the harness under test uses on failure (default: 1)",
    )


@pytest.fixture
def stream() -> io.StringIO:
    """Fixture providing an in-memory output stream."""
    return io.StringIO()


@pytest.fixture
def runner_config(request, stream) -> RunnerConfig:
    """Fixture providing a run configuration that writes to ``stream``."""
    return RunnerConfig(
        stream=stream,
        exit_on_failure=True,
        failure_exit_code=request.config.getoption("--failure-exit-code"),
    )


@pytest.fixture
def harness(stream) -> Harness:
    """Fixture providing an isolated harness that never exits the process."""
    return Harness(RunnerConfig(stream=stream, exit_on_failure=False))


@pytest.fixture
def exiting_harness(runner_config) -> Harness:
    """Fixture providing an isolated harness that exits on failure."""
    return Harness(runner_config)


@pytest.fixture
def output(stream):
    """Fixture returning a callable that yields the printed lines."""

    def _lines():
        return [line for line in stream.getvalue().splitlines() if line]

    return _lines


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "e2e: mark test as an end-to-end harness scenario"
    )

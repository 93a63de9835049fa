"""
Tests for suite registration and the declaration state machine.
"""

import pytest

from minispec.core.errors import UsageError
from minispec.core.registry import Registry, RegistryState


def _noop():
    pass


class TestRegistry:
    """Test suite for Registry."""

    def test_open_suite_tracks_state(self):
        registry = Registry()
        assert registry.state is RegistryState.IDLE

        with registry.open_suite("Math") as suite:
            assert registry.state is RegistryState.DECLARING
            assert registry.current_suite is suite

        assert registry.state is RegistryState.IDLE
        assert registry.current_suite is None
        assert [s.name for s in registry.suites] == ["Math"]

    def test_tests_keep_insertion_order(self):
        registry = Registry()
        with registry.open_suite("Math"):
            for name in ["c", "a", "b"]:
                registry.add_test(name, _noop)

        assert [t.name for t in registry.suites[0].tests] == ["c", "a", "b"]

    def test_action_is_stored_not_called(self):
        calls = []
        registry = Registry()
        with registry.open_suite("Math"):
            registry.add_test("records", lambda: calls.append(1))
        assert calls == []

    def test_add_test_outside_suite_raises(self):
        registry = Registry()
        with pytest.raises(UsageError, match="outside a suite"):
            registry.add_test("orphan", _noop)
        assert len(registry) == 0

    def test_add_test_after_suite_closed_raises(self):
        registry = Registry()
        with registry.open_suite("Math"):
            pass
        with pytest.raises(UsageError):
            registry.add_test("late", _noop)
        assert len(registry.suites[0]) == 0

    def test_state_cleared_when_body_raises(self):
        registry = Registry()
        with pytest.raises(RuntimeError):
            with registry.open_suite("Broken"):
                registry.add_test("kept", _noop)
                raise RuntimeError("boom")

        assert registry.state is RegistryState.IDLE
        assert [t.name for t in registry.suites[0].tests] == ["kept"]

    def test_nested_suite_raises(self):
        registry = Registry()
        with registry.open_suite("Outer"):
            with pytest.raises(UsageError, match="nested"):
                with registry.open_suite("Inner"):
                    pass
            assert registry.current_suite.name == "Outer"
        assert [s.name for s in registry.suites] == ["Outer"]

    def test_sealed_registry_rejects_suites(self):
        registry = Registry()
        registry.seal()
        with pytest.raises(UsageError, match="after the run started"):
            with registry.open_suite("Late"):
                pass
        assert len(registry) == 0

    def test_non_callable_action_raises(self):
        registry = Registry()
        with registry.open_suite("Math"):
            with pytest.raises(TypeError):
                registry.add_test("bad", 42)

    def test_reset_clears_and_unseals(self):
        registry = Registry()
        with registry.open_suite("Math"):
            registry.add_test("a", _noop)
        registry.seal()

        registry.reset()

        assert len(registry) == 0
        assert not registry.sealed

    def test_reset_during_declaration_raises(self):
        registry = Registry()
        with registry.open_suite("Math"):
            with pytest.raises(UsageError):
                registry.reset()

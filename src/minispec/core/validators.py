"""
Assertion utilities.

Provides same-value equality and the ``expect(...).to_be(...)`` wrapper
used inside test actions.
"""

from typing import Any, Generic, TypeVar

import numpy as np

T = TypeVar("T")

_BOOL_TYPES = (bool, np.bool_)
_FLOAT_TYPES = (float, np.floating)
_REAL_TYPES = (int, float, np.integer, np.floating)
_COMPLEX_TYPES = (complex, np.complexfloating)
_TEXT_TYPES = (str, bytes)


def _is_nan(value: Any) -> bool:
    return isinstance(value, _FLOAT_TYPES) and bool(np.isnan(value))


def _same_real(a: Any, b: Any) -> bool:
    if _is_nan(a) or _is_nan(b):
        return _is_nan(a) and _is_nan(b)
    if a != b:
        return False
    # 0.0 and -0.0 compare equal but are distinct values
    if a == 0:
        return bool(np.signbit(a)) == bool(np.signbit(b))
    return True


def same_value(a: Any, b: Any) -> bool:
    """Compare two values with same-value semantics.

    Scalars (booleans, real and complex numbers, str and bytes) are equal
    when they hold the same value. NaN equals NaN, while positive and
    negative zero are distinct. Any other object is only equal to itself.

    Args:
        a: Received value.
        b: Expected value.

    Returns:
        True if the two values are the same value.
    """
    if a is b:
        return True

    if isinstance(a, _BOOL_TYPES) or isinstance(b, _BOOL_TYPES):
        return (
            isinstance(a, _BOOL_TYPES)
            and isinstance(b, _BOOL_TYPES)
            and bool(a) == bool(b)
        )

    if isinstance(a, _REAL_TYPES) and isinstance(b, _REAL_TYPES):
        return _same_real(a, b)

    if isinstance(a, _COMPLEX_TYPES) or isinstance(b, _COMPLEX_TYPES):
        if not isinstance(a, _COMPLEX_TYPES + _REAL_TYPES):
            return False
        if not isinstance(b, _COMPLEX_TYPES + _REAL_TYPES):
            return False
        a, b = complex(a), complex(b)
        return _same_real(a.real, b.real) and _same_real(a.imag, b.imag)

    # numpy.str_ and numpy.bytes_ subclass str and bytes
    for text_type in _TEXT_TYPES:
        if isinstance(a, text_type) and isinstance(b, text_type):
            return str(a) == str(b) if text_type is str else bytes(a) == bytes(b)

    return False


class Expectation(Generic[T]):
    """Wraps a received value for comparison against an expected one."""

    def __init__(self, received: T):
        self.received = received

    def to_be(self, expected: T) -> None:
        """Assert that the received value is the same value as ``expected``.

        Raises:
            AssertionError: If the values differ under same-value equality.
        """
        if not same_value(self.received, expected):
            raise AssertionError(
                f"Expected {self.received!r} to be {expected!r}"
            )

    toBe = to_be

    def __repr__(self) -> str:
        return f"Expectation({self.received!r})"


def expect(value: T) -> Expectation[T]:
    """Start an assertion on ``value``."""
    return Expectation(value)

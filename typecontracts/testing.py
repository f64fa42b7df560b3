"""Assertion helpers for test suites.

    from typecontracts import dsl as t
    from typecontracts.testing import assert_type, assert_not_type

    def test_count():
        assert_type(5, t.integer(minimum=0))
        assert_not_type("5", t.integer())
"""
from typing import Any

from typecontracts.types import Type


def has_type(value: Any, type_: Type) -> bool:
    """True iff ``value`` satisfies ``type_``."""
    return type_.check(value).is_success()


def assert_type(value: Any, type_: Type) -> None:
    """Fail with every accumulated reason when ``value`` is rejected."""
    result = type_.check(value)
    if not result.is_success():
        reasons = "\n".join(f"  - {reason}" for reason in result.reasons)
        raise AssertionError(f"expected {value!r} to have type {type_.constraint_name}:\n{reasons}")


def assert_not_type(value: Any, type_: Type) -> None:
    if type_.check(value).is_success():
        raise AssertionError(f"expected {value!r} not to have type {type_.constraint_name}")

"""Leaf Predicate Types

Frozen dataclass predicates; each ``check`` is a pure function of the
node's fields and the value. Rejections are reported as Failure reasons,
never raised.

Comparisons against incomparable values (``MinimumType``/``MaximumType``)
fail with a "cannot compare" reason unless the node is ``strict``, in which
case the underlying TypeError propagates.
"""
from __future__ import annotations

import re
import reprlib
from dataclasses import dataclass, field
from typing import Any, Callable

from .base import Type
from .result import Result, failure, success

_repr = reprlib.Repr()
_repr.maxstring = 50
_repr.maxother = 50


def _show(value: Any) -> str:
    return _repr.repr(value)


def _type_name(value: Any) -> str:
    return type(value).__name__


# ============================================================================
# Trivial Types
# ============================================================================

@dataclass(frozen=True, slots=True)
class AnyType(Type):
    """Accepts every value."""

    @property
    def constraint_name(self) -> str:
        return "any"

    def check(self, value: Any) -> Result:
        return success()


@dataclass(frozen=True, slots=True)
class VoidType(Type):
    """Accepts nothing."""

    @property
    def constraint_name(self) -> str:
        return "void"

    def check(self, value: Any) -> Result:
        return failure(f"{_show(value)} rejected: no value satisfies void")


# ============================================================================
# Class Membership
# ============================================================================

@dataclass(frozen=True, slots=True)
class ClassType(Type):
    """Value must be an instance of one of ``classes`` and of none of ``exclude``.

    ``exclude`` carves subclasses out of a target, e.g. ``bool`` out of ``int``.
    """
    classes: tuple[type, ...]
    exclude: tuple[type, ...] = ()

    def __init__(self, *classes: type, exclude: type | tuple[type, ...] = ()):
        if not classes:
            raise TypeError("ClassType requires at least one class")
        exclude = exclude if isinstance(exclude, tuple) else (exclude,)
        for c in (*classes, *exclude):
            if not isinstance(c, type):
                raise TypeError(f"ClassType expects classes, got {_show(c)}")
        object.__setattr__(self, "classes", tuple(classes)); object.__setattr__(self, "exclude", exclude)

    @property
    def constraint_name(self) -> str:
        names = " | ".join(c.__name__ for c in self.classes)
        return f"of_class[{names}]"

    def check(self, value: Any) -> Result:
        if isinstance(value, self.classes) and not (self.exclude and isinstance(value, self.exclude)):
            return success()
        expected = " or ".join(c.__name__ for c in self.classes)
        return failure(f"expected {expected}, got {_type_name(value)}")


# ============================================================================
# Numeric Bounds
# ============================================================================

@dataclass(frozen=True, slots=True)
class MinimumType(Type):
    """Value must satisfy ``minimum <= value``."""
    minimum: Any
    strict: bool = False

    @property
    def constraint_name(self) -> str:
        return f"minimum[{self.minimum!r}]"

    def check(self, value: Any) -> Result:
        try:
            satisfied = self.minimum <= value
        except TypeError:
            if self.strict: raise
            return failure(f"cannot compare {_type_name(value)} {_show(value)} with minimum {self.minimum!r}")
        if satisfied:
            return success()
        return failure(f"{_show(value)} is less than minimum {self.minimum!r}")


@dataclass(frozen=True, slots=True)
class MaximumType(Type):
    """Value must satisfy ``value <= maximum``."""
    maximum: Any
    strict: bool = False

    @property
    def constraint_name(self) -> str:
        return f"maximum[{self.maximum!r}]"

    def check(self, value: Any) -> Result:
        try:
            satisfied = value <= self.maximum
        except TypeError:
            if self.strict: raise
            return failure(f"cannot compare {_type_name(value)} {_show(value)} with maximum {self.maximum!r}")
        if satisfied:
            return success()
        return failure(f"{_show(value)} exceeds maximum {self.maximum!r}")


# ============================================================================
# String Matching
# ============================================================================

@dataclass(frozen=True, slots=True)
class PatternType(Type):
    """String value must contain a match for ``pattern`` (unanchored search)."""
    pattern: str | re.Pattern
    _compiled: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_compiled", re.compile(self.pattern))

    @property
    def constraint_name(self) -> str:
        return f"pattern[{self._compiled.pattern}]"

    def check(self, value: Any) -> Result:
        if not isinstance(value, str):
            return failure(f"expected str to match pattern {self._compiled.pattern!r}, got {_type_name(value)}")
        if self._compiled.search(value) is None:
            return failure(f"{_show(value)} does not match pattern {self._compiled.pattern!r}")
        return success()


# ============================================================================
# Boolean Queries
# ============================================================================

def _resolve_query(value: Any, method: str) -> Callable[[], Any] | None:
    """Find a zero-argument query on value.

    Accepts Python names (``isdigit``) and question-mark spellings
    (``empty?`` tries ``empty``, ``is_empty``, ``isempty``).
    """
    stem = method.rstrip("?")
    for name in dict.fromkeys((method, stem, f"is_{stem}", f"is{stem}")):
        attr = getattr(value, name, None)
        if callable(attr):
            return attr
    return None


@dataclass(frozen=True, slots=True)
class IsType(Type):
    """Named zero-argument query on the value must return a truthy result."""
    method: str

    @property
    def constraint_name(self) -> str:
        return f"is[{self.method}]"

    def check(self, value: Any) -> Result:
        if (query := _resolve_query(value, self.method)) is None:
            return failure(f"{_type_name(value)} has no query '{self.method}'")
        if query():
            return success()
        return failure(f"{_show(value)}.{self.method} is false")


@dataclass(frozen=True, slots=True)
class IsNotType(Type):
    """Named zero-argument query on the value must return a falsy result."""
    method: str

    @property
    def constraint_name(self) -> str:
        return f"is_not[{self.method}]"

    def check(self, value: Any) -> Result:
        if (query := _resolve_query(value, self.method)) is None:
            return failure(f"{_type_name(value)} has no query '{self.method}'")
        if query():
            return failure(f"{_show(value)}.{self.method} is true")
        return success()


# ============================================================================
# Structure
# ============================================================================

@dataclass(frozen=True, slots=True)
class HasType(Type):
    """Value must expose attribute ``member`` whose value satisfies ``expected_type``."""
    member: str
    expected_type: Type = field(default_factory=AnyType)

    def __post_init__(self):
        if not isinstance(self.expected_type, Type):
            raise TypeError(f"HasType expected_type must be a Type, got {_type_name(self.expected_type)}")

    @property
    def constraint_name(self) -> str:
        return f"has[{self.member}: {self.expected_type.constraint_name}]"

    def check(self, value: Any) -> Result:
        # Retrieved once; a raising getter rejects the value.
        try:
            member = getattr(value, self.member)
        except AttributeError:
            return failure(f"{_type_name(value)} has no member '{self.member}'")
        except Exception as e:
            return failure(f"{_type_name(value)}.{self.member} raised {type(e).__name__}: {e}")
        return self.expected_type.check(member).prefixed(self.member)


@dataclass(frozen=True, slots=True)
class ValueType(Type):
    """Value must equal ``expected``."""
    expected: Any

    @property
    def constraint_name(self) -> str:
        return f"value[{self.expected!r}]"

    def check(self, value: Any) -> Result:
        if value == self.expected:
            return success()
        return failure(f"expected {_show(self.expected)}, got {_show(value)}")


@dataclass(frozen=True, slots=True)
class ArrayType(Type):
    """Value must be a list or tuple whose every element satisfies ``element_type``."""
    element_type: Type

    def __post_init__(self):
        if not isinstance(self.element_type, Type):
            raise TypeError(f"ArrayType element_type must be a Type, got {_type_name(self.element_type)}")

    @property
    def constraint_name(self) -> str:
        return f"array[{self.element_type.constraint_name}]"

    def check(self, value: Any) -> Result:
        if not isinstance(value, (list, tuple)):
            return failure(f"expected list or tuple, got {_type_name(value)}")
        result = success()
        for index, element in enumerate(value):
            result = result.and_also(lambda: self.element_type.check(element).prefixed(f"[{index}]"))
            if not result:
                break
        return result


# ============================================================================
# Custom Predicate
# ============================================================================

@dataclass(frozen=True, slots=True)
class SatisfiesType(Type):
    """Predicate from a plain function returning a truthy/falsy verdict.

    Usage:
        even = SatisfiesType(lambda n: n % 2 == 0, name="even")

    Exceptions raised by ``fn`` are reported as rejections.
    """
    fn: Callable[[Any], Any]
    name: str = "custom"

    @property
    def constraint_name(self) -> str:
        return self.name

    def check(self, value: Any) -> Result:
        try:
            verdict = self.fn(value)
        except Exception as e:
            return failure(f"{self.name} check raised {type(e).__name__}: {e}")
        if verdict:
            return success()
        return failure(f"{_show(value)} is not {self.name}")

"""Union and Intersection Combinators

Both are folds over the ordered child list:
- Intersection folds ``and_also`` from Success; the first failing child
  ends evaluation and its reasons are returned unchanged.
- Union folds ``or_else`` starting from the first child's result; the first
  passing child ends evaluation, otherwise every child's reasons are
  returned in child order.

Empty combinators succeed: there is nothing to reject the value.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import partial, reduce
from typing import Any, Iterable

from .base import Type
from .result import Result, success


def _as_children(children: Iterable[Type]) -> tuple[Type, ...]:
    children = tuple(children)
    for child in children:
        if not isinstance(child, Type):
            raise TypeError(f"Combinator children must be Type instances, got {type(child).__name__}")
    return children


@dataclass(frozen=True, slots=True)
class IntersectionType(Type):
    """AND combinator: all children must pass (short-circuit on first failure)."""
    children: tuple[Type, ...]

    def __post_init__(self):
        object.__setattr__(self, "children", _as_children(self.children))

    @property
    def constraint_name(self) -> str:
        return f"({' AND '.join(c.constraint_name for c in self.children)})" if self.children else "any"

    def check(self, value: Any) -> Result:
        return reduce(lambda acc, child: acc.and_also(partial(child.check, value)), self.children, success())


@dataclass(frozen=True, slots=True)
class UnionType(Type):
    """OR combinator: at least one child must pass (accumulates rejections)."""
    children: tuple[Type, ...]

    def __post_init__(self):
        object.__setattr__(self, "children", _as_children(self.children))

    @property
    def constraint_name(self) -> str:
        return f"({' OR '.join(c.constraint_name for c in self.children)})" if self.children else "any"

    def check(self, value: Any) -> Result:
        if not self.children:
            return success()
        head, *rest = self.children
        return reduce(lambda acc, child: acc.or_else(partial(child.check, value)), rest, head.check(value))


def intersect(*types: Type) -> IntersectionType:
    """Functional form of ``a & b``; accepts any number of children."""
    return IntersectionType(types)


def union(*types: Type) -> UnionType:
    """Functional form of ``a | b``; accepts any number of children."""
    return UnionType(types)

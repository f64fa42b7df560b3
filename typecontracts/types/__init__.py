"""Predicate Types

A small algebra of runtime predicates. Every type implements
``check(value) -> Result`` and combines with ``&`` (intersection) and
``|`` (union).
"""
from .result import (
    Result,
    Success,
    Failure,
    success,
    failure,
)

from .base import Type

from .predicates import (
    AnyType,
    VoidType,
    ClassType,
    MinimumType,
    MaximumType,
    PatternType,
    IsType,
    IsNotType,
    HasType,
    ValueType,
    ArrayType,
    SatisfiesType,
)

from .combinators import (
    IntersectionType,
    UnionType,
    intersect,
    union,
)

__all__ = [
    # Results
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    # Base
    "Type",
    # Leaf types
    "AnyType",
    "VoidType",
    "ClassType",
    "MinimumType",
    "MaximumType",
    "PatternType",
    "IsType",
    "IsNotType",
    "HasType",
    "ValueType",
    "ArrayType",
    "SatisfiesType",
    # Combinators
    "IntersectionType",
    "UnionType",
    "intersect",
    "union",
]

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .combinators import IntersectionType, UnionType
    from .result import Result


class Type(ABC):
    """Base class for predicate types.

    Types are immutable and composable via operators:
    - & (AND): all must pass, stops at the first failure
    - | (OR): at least one must pass, accumulates every rejection
    """
    __slots__ = ()

    @abstractmethod
    def check(self, value: Any) -> Result:
        """Check a value. Returns Success or Failure, never raises for a rejected value."""

    @property
    @abstractmethod
    def constraint_name(self) -> str:
        """Human-readable constraint name for reasons and reprs."""

    def __call__(self, value: Any) -> Result: return self.check(value)

    def __and__(self, other: Type) -> IntersectionType:
        if not isinstance(other, Type): return NotImplemented
        from .combinators import IntersectionType
        return IntersectionType((self, other))

    def __or__(self, other: Type) -> UnionType:
        if not isinstance(other, Type): return NotImplemented
        from .combinators import UnionType
        return UnionType((self, other))

"""Accumulating Check Results

Success/Failure values produced by ``Type.check``. Failures carry an ordered,
never-empty tuple of human-readable reasons.

Composition rules:
- ``and_also`` short-circuits on Failure: later checks are never run.
- ``or_else`` short-circuits on Success; when both sides fail, the reasons
  of both are concatenated in order.

Usage:
    match integer().check(value):
        case Success():
            ...
        case Failure(reasons):
            log.warning("rejected", reasons=reasons)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union, final


@final
@dataclass(frozen=True, slots=True)
class Success:
    """Value satisfied the predicate."""

    @property
    def reasons(self) -> tuple[str, ...]:
        return ()

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def and_also(self, f: Callable[[], Result]) -> Result:
        """Continue the AND-chain."""
        return f()

    def or_else(self, f: Callable[[], Result]) -> Result:
        """OR-chain already satisfied; ``f`` is never called."""
        return self

    def prefixed(self, label: str) -> Result:
        return self

    def to_dict(self) -> dict[str, Any]:
        return {"success": True}

    def __bool__(self) -> bool:
        return True


@final
@dataclass(frozen=True, slots=True)
class Failure:
    """Value was rejected, with the reasons why."""
    reasons: tuple[str, ...]

    def __post_init__(self):
        if isinstance(self.reasons, str):
            object.__setattr__(self, "reasons", (self.reasons,))
        elif not isinstance(self.reasons, tuple):
            object.__setattr__(self, "reasons", tuple(self.reasons))
        if not self.reasons:
            raise ValueError("Failure requires at least one reason")

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def and_also(self, f: Callable[[], Result]) -> Result:
        """AND-chain broken; ``f`` is never called."""
        return self

    def or_else(self, f: Callable[[], Result]) -> Result:
        """Try the alternative, accumulating reasons if it fails too."""
        match f():
            case Success() as ok:
                return ok
            case Failure(reasons):
                return Failure(self.reasons + reasons)

    def prefixed(self, label: str) -> Result:
        """Qualify every reason with where it came from (member, index)."""
        return Failure(tuple(f"{label}: {reason}" for reason in self.reasons))

    def to_dict(self) -> dict[str, Any]:
        return {"success": False, "reasons": list(self.reasons)}

    def __bool__(self) -> bool:
        return False


Result = Union[Success, Failure]

_SUCCESS = Success()


def success() -> Success:
    """Construct Success."""
    return _SUCCESS


def failure(reason: str) -> Failure:
    """Construct Failure with a single reason."""
    return Failure((reason,))

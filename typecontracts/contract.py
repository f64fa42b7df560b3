"""Contracts: named predicate declarations checked against explicit values

A contract never inspects the caller's scope. Values are passed in as a
mapping (or bound from a call's arguments by ``checked``), each declared
name is resolved in it, and every binding is checked. Reports keep every
failing name so callers see the complete picture.

Usage:
    from typecontracts import Contract, checked, dsl as t

    contract = Contract(count=t.integer(minimum=0), name=t.string(regex=r"^\\w+$"))
    report = contract.evaluate({"count": 3, "name": "widget"})
    assert report.ok

    @checked(x=t.numeric(), unit=t.one_of("m", "s"))
    def scale(x, unit="m"):
        ...
"""
from __future__ import annotations

import inspect
from dataclasses import dataclass
from functools import wraps
from types import MappingProxyType
from typing import Any, Callable, Mapping, TypeVar

from typecontracts.errors import ConfigurationError, ContractViolation, invalid_declaration
from typecontracts.logging import contract_logger
from typecontracts.types import Result, Type, failure

F = TypeVar("F", bound=Callable[..., Any])

_UNBOUND = object()


@dataclass(frozen=True, slots=True)
class Binding:
    """One ``(name, value, result)`` triple from a contract evaluation."""
    name: str
    value: Any
    result: Result

    @property
    def ok(self) -> bool:
        return self.result.is_success()

    @property
    def bound(self) -> bool:
        return self.value is not _UNBOUND


@dataclass(frozen=True, slots=True)
class ContractReport:
    """Outcome of checking every declaration of a contract."""
    bindings: tuple[Binding, ...]

    @property
    def ok(self) -> bool:
        return all(b.ok for b in self.bindings)

    @property
    def failures(self) -> tuple[Binding, ...]:
        return tuple(b for b in self.bindings if not b.ok)

    @property
    def reasons(self) -> dict[str, tuple[str, ...]]:
        """Failing names mapped to their accumulated reasons, in declaration order."""
        return {b.name: b.result.reasons for b in self.failures}

    def raise_for_failures(self, *, origin: str = "contract") -> ContractReport:
        """Raise ContractViolation if any binding failed; otherwise return self."""
        if not self.ok:
            raise ContractViolation(self, origin=origin)
        return self

    def to_dict(self) -> dict[str, Any]:
        return {"ok": self.ok, "bindings": {b.name: b.result.to_dict() for b in self.bindings}}

    def __bool__(self) -> bool:
        return self.ok


class Contract:
    """Named predicate declarations.

    Declarations are validated when the contract is built; a non-Type
    declaration is a ConfigurationError, not a check-time failure.

    Every keyword argument is a declaration, so any identifier (``origin``
    included) can be declared. Use ``Contract.at`` to label the contract.
    """
    __slots__ = ("_declarations", "origin")

    def __init__(self, declarations: Mapping[str, Type] | None = None, /, **kwargs: Type):
        self._bind({**(declarations or {}), **kwargs}, "contract")

    @classmethod
    def at(cls, origin: str, declarations: Mapping[str, Type]) -> Contract:
        """Contract whose violations and log events are labelled ``origin``."""
        contract = cls.__new__(cls)
        contract._bind(dict(declarations), origin)
        return contract

    def _bind(self, declarations: dict[str, Type], origin: str) -> None:
        for name, type_ in declarations.items():
            if not isinstance(type_, Type):
                raise ConfigurationError(invalid_declaration(name, f"expected a Type, got {type(type_).__name__}", origin))
        self._declarations = MappingProxyType(declarations)
        self.origin = origin

    @property
    def declarations(self) -> Mapping[str, Type]:
        return self._declarations

    def evaluate(self, values: Mapping[str, Any]) -> ContractReport:
        """Check each declared name against its value in ``values``."""
        bindings = []
        for name, type_ in self._declarations.items():
            value = values.get(name, _UNBOUND)
            result = type_.check(value) if value is not _UNBOUND else failure(f"{name} is not bound")
            bindings.append(Binding(name, value, result))
        return ContractReport(tuple(bindings))

    def enforce(self, values: Mapping[str, Any]) -> ContractReport:
        """Evaluate and raise ContractViolation on any failure."""
        report = self.evaluate(values)
        if not report.ok:
            contract_logger().warning(
                "contract_violated",
                origin=self.origin,
                names=list(report.reasons),
                reasons={name: list(reasons) for name, reasons in report.reasons.items()},
            )
        return report.raise_for_failures(origin=self.origin)

    def __repr__(self) -> str:
        decls = ", ".join(f"{name}={t.constraint_name}" for name, t in self._declarations.items())
        return f"Contract({decls})"


def typecheck(values: Mapping[str, Any], /, **declarations: Type) -> ContractReport:
    """One-shot evaluation of ``declarations`` against ``values``."""
    return Contract(declarations).evaluate(values)


def checked(**declarations: Type) -> Callable[[F], F]:
    """Decorator enforcing a contract over a function's arguments.

    Arguments are bound with the function's signature (defaults applied)
    before each call. Declaring a name the function does not accept is a
    ConfigurationError at decoration time.
    """
    def decorator(fn: F) -> F:
        signature = inspect.signature(fn)
        origin = getattr(fn, "__qualname__", repr(fn))
        unknown = [name for name in declarations if name not in signature.parameters]
        if unknown:
            raise ConfigurationError(invalid_declaration(unknown[0], f"{origin} has no parameter '{unknown[0]}'", origin))
        contract = Contract.at(origin, declarations)

        @wraps(fn)
        def wrapper(*args, **kwargs):
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()
            contract.enforce(bound.arguments)
            return fn(*args, **kwargs)

        wrapper.__contract__ = contract
        return wrapper  # type: ignore
    return decorator

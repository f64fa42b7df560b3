"""typecontracts: composable runtime value contracts

Predicates are built from named constructors, combined with ``&`` and
``|``, and checked against values. A check returns Success, or a Failure
carrying every reason the value was rejected.

Usage:
    from typecontracts import dsl as t

    small_or_odd = t.integer(minimum=0, maximum=10) | t.odd()
    result = small_or_odd.check(13)
    if not result.is_success():
        print(result.reasons)
"""
__version__ = "0.1.0"

from typecontracts.types import (
    Result,
    Success,
    Failure,
    success,
    failure,
    Type,
    intersect,
    union,
)

from typecontracts.registry import (
    TypeRegistry,
    TypeNamespace,
    build_default_registry,
    default_registry,
)

from typecontracts.contract import (
    Binding,
    Contract,
    ContractReport,
    checked,
    typecheck,
)

from typecontracts.errors import (
    ConfigurationError,
    ContractViolation,
    ErrorCode,
)

dsl = default_registry.namespace

__all__ = [
    "__version__",
    # Results
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    # Types
    "Type",
    "intersect",
    "union",
    # Registry
    "TypeRegistry",
    "TypeNamespace",
    "build_default_registry",
    "default_registry",
    "dsl",
    # Contracts
    "Binding",
    "Contract",
    "ContractReport",
    "checked",
    "typecheck",
    # Errors
    "ConfigurationError",
    "ContractViolation",
    "ErrorCode",
]

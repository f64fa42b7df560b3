"""Error Builders

Ergonomic constructors for the library's typed errors. Each builder creates
an AppError with the appropriate code, origin and metadata.
"""
from typing import Iterable, Mapping

from .types import AppError, ErrorCode, ErrorContext


# =============================================================================
# Configuration Errors (E5xxx)
# =============================================================================

def configuration_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E5100_CONFIGURATION_GENERIC,
    origin: str = "registry",
    **metadata,
) -> AppError:
    """Create configuration (setup-time) error."""
    return AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in metadata.items() if v is not None},
    )


def invalid_registration(name: str, reason: str) -> AppError:
    return configuration_error(
        f"Cannot register '{name}': {reason}",
        code=ErrorCode.E5101_INVALID_REGISTRATION,
        name=name,
    )


def duplicate_registration(name: str) -> AppError:
    return configuration_error(
        f"Constructor '{name}' is already registered",
        code=ErrorCode.E5102_DUPLICATE_REGISTRATION,
        name=name,
    )


def registry_frozen(name: str) -> AppError:
    return configuration_error(
        f"Cannot register '{name}': registry is frozen",
        code=ErrorCode.E5103_REGISTRY_FROZEN,
        name=name,
    )


def invalid_declaration(name: str, reason: str, origin: str = "contract") -> AppError:
    return configuration_error(
        f"Invalid declaration for '{name}': {reason}",
        code=ErrorCode.E5104_INVALID_DECLARATION,
        origin=origin,
        name=name,
    )


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def constraint_violation(
    violations: Mapping[str, Iterable[str]],
    *,
    origin: str = "contract",
) -> AppError:
    """Create contract violation error listing every failing name and its reasons."""
    names = list(violations)
    if len(names) == 1:
        message = f"Contract violated for '{names[0]}'"
    else:
        message = f"Contract violated for {len(names)} names: {', '.join(names)}"
    return AppError(
        code=ErrorCode.E2005_CONSTRAINT_VIOLATION,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={"violations": {name: list(reasons) for name, reasons in violations.items()}},
    )

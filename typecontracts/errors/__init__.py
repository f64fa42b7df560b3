"""Error Handling

Key components:
- ErrorCode: Hierarchical error code taxonomy
- AppError: Error record with code, message, metadata and context
- ConfigurationError: raised at setup for bad registrations/declarations
- ContractViolation: raised when an enforced contract fails

Usage:
    from typecontracts.errors import ConfigurationError, ErrorCode

    try:
        registry.register("broken")
    except ConfigurationError as exc:
        assert exc.code is ErrorCode.E5101_INVALID_REGISTRATION
"""
from .types import (
    AppError,
    ErrorCode,
    ErrorContext,
)

from .builders import (
    configuration_error,
    invalid_registration,
    duplicate_registration,
    registry_frozen,
    invalid_declaration,
    constraint_violation,
)

from .exceptions import (
    AppErrorException,
    ConfigurationError,
    ContractViolation,
)

__all__ = [
    # Core types
    "AppError",
    "ErrorCode",
    "ErrorContext",
    # Builders
    "configuration_error",
    "invalid_registration",
    "duplicate_registration",
    "registry_frozen",
    "invalid_declaration",
    "constraint_violation",
    # Exceptions
    "AppErrorException",
    "ConfigurationError",
    "ContractViolation",
]

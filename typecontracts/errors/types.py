"""Error Types

Typed error codes and immutable error records. Validation outcomes are
returned as data (see ``typecontracts.types.result``); the records here
describe programmer errors and contract violations that cross the library
boundary as exceptions.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class ErrorCode(Enum):
    """Hierarchical error code taxonomy.

    E2xxx: Validation errors (contract violations)
    E5xxx: Configuration errors (registry and declaration setup)
    """
    # Validation (E2xxx)
    E2005_CONSTRAINT_VIOLATION = 2005

    # Configuration (E5xxx)
    E5100_CONFIGURATION_GENERIC = 5100
    E5101_INVALID_REGISTRATION = 5101
    E5102_DUPLICATE_REGISTRATION = 5102
    E5103_REGISTRY_FROZEN = 5103
    E5104_INVALID_DECLARATION = 5104

    @property
    def category(self) -> str:
        """Human-readable error category."""
        code = self.value
        if 2000 <= code < 3000:
            return "validation"
        return "configuration"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Immutable context for error tracing and debugging."""
    correlation_id: str = field(default_factory=lambda: str(uuid4())[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""


@dataclass(frozen=True, slots=True)
class AppError:
    """Library error with code, message, metadata and tracing context."""
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)

    def with_metadata(self, **kwargs) -> AppError:
        """Create new error with additional metadata."""
        return AppError(
            code=self.code,
            message=self.message,
            context=self.context,
            metadata={**self.metadata, **kwargs},
        )

    def to_dict(self) -> dict:
        """Serialize error for reports."""
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
                "origin": self.context.origin,
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"

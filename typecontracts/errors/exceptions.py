"""Exceptions raised across the library boundary.

Expected validation outcomes are never raised by ``check``; these wrap
AppError for setup mistakes and for contracts that are explicitly enforced.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from .builders import constraint_violation
from .types import AppError

if TYPE_CHECKING:
    from typecontracts.contract import ContractReport


class AppErrorException(Exception):
    """Exception wrapper for AppError."""

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))

    @property
    def code(self):
        return self.error.code


class ConfigurationError(AppErrorException):
    """Fatal setup error: bad registration or contract declaration."""


class ContractViolation(AppErrorException):
    """Raised when an enforced contract has failing bindings."""

    def __init__(self, report: ContractReport, *, origin: str = "contract"):
        self.report = report
        super().__init__(constraint_violation(report.reasons, origin=origin))

    def __str__(self) -> str:
        lines = [self.error.message]
        for name, reasons in self.report.reasons.items():
            lines.extend(f"  {name}: {reason}" for reason in reasons)
        return "\n".join(lines)

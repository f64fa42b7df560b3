"""
Tests for environment-driven settings, logging setup and the testing helpers.
"""

import logging

import pytest
import structlog
from pydantic import ValidationError

from typecontracts import __version__, dsl
from typecontracts.config import Settings
from typecontracts.errors import AppError, ErrorCode, invalid_registration
from typecontracts.logging import (
    LoggerRegistry,
    configure_from_settings,
    configure_logging,
    contract_logger,
    registry_logger,
)
from typecontracts.testing import assert_not_type, assert_type, has_type


class TestSettings:
    def test_defaults(self, monkeypatch):
        for key in ("TYPECONTRACTS_LOG_LEVEL", "TYPECONTRACTS_LOG_JSON", "TYPECONTRACTS_STRICT_COMPARISONS"):
            monkeypatch.delenv(key, raising=False)
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_JSON is False
        assert settings.STRICT_COMPARISONS is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("TYPECONTRACTS_STRICT_COMPARISONS", "true")
        monkeypatch.setenv("TYPECONTRACTS_LOG_LEVEL", "debug")
        settings = Settings(_env_file=None)
        assert settings.STRICT_COMPARISONS is True
        assert settings.LOG_LEVEL == "debug"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="LOUD", _env_file=None)


class TestLogging:
    def test_configure_logging_installs_library_handler(self):
        configure_logging(level="DEBUG", json_logs=True)
        library_logger = logging.getLogger("typecontracts")
        assert library_logger.level == logging.DEBUG
        assert len(library_logger.handlers) == 1
        assert isinstance(library_logger.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        assert structlog.is_configured()

    def test_configure_from_settings(self, monkeypatch):
        from typecontracts.config import get_settings

        monkeypatch.setenv("TYPECONTRACTS_LOG_LEVEL", "WARNING")
        get_settings.cache_clear()
        try:
            configure_from_settings()
            assert logging.getLogger("typecontracts").level == logging.WARNING
        finally:
            get_settings.cache_clear()

    def test_domain_loggers_are_cached(self):
        assert registry_logger() is registry_logger()
        assert contract_logger() is not registry_logger()
        assert set(LoggerRegistry._loggers) == {"registry", "contract"}


class TestErrors:
    def test_builder_sets_code_and_origin(self):
        error = invalid_registration("x", "missing type or factory")
        assert isinstance(error, AppError)
        assert error.code is ErrorCode.E5101_INVALID_REGISTRATION
        assert error.code.category == "configuration"
        assert error.context.origin == "registry"
        assert error.metadata == {"name": "x"}

    def test_code_categories(self):
        assert {code.category for code in ErrorCode} == {"validation", "configuration"}
        assert ErrorCode.E2005_CONSTRAINT_VIOLATION.category == "validation"

    def test_to_dict(self):
        data = invalid_registration("x", "bad").with_metadata(hint="h").to_dict()["error"]
        assert data["code"] == "E5101_INVALID_REGISTRATION"
        assert data["metadata"] == {"name": "x", "hint": "h"}


class TestTestingHelpers:
    def test_has_type(self):
        assert has_type(5, dsl.integer())
        assert not has_type("5", dsl.integer())

    def test_assert_type_reports_reasons(self):
        assert_type([1, 2], dsl.array(dsl.integer()))
        with pytest.raises(AssertionError, match="expected 4 to have type") as exc_info:
            assert_type(4, dsl.one_of(1, 2, 3))
        assert str(exc_info.value).count("  - ") == 3

    def test_assert_not_type(self):
        assert_not_type("abc", dsl.void())
        with pytest.raises(AssertionError):
            assert_not_type("abc", dsl.any())


def test_version():
    assert __version__ == "0.1.0"

"""
Shared fixtures: a fresh, unfrozen registry per test with explicit settings,
so tests never depend on the process environment or the frozen default.
"""

import pytest
import structlog

from typecontracts.config import Settings
from typecontracts.logging import LoggerRegistry
from typecontracts.registry import build_default_registry


@pytest.fixture
def settings():
    return Settings(LOG_LEVEL="INFO", LOG_JSON=False, STRICT_COMPARISONS=False)


@pytest.fixture
def registry(settings):
    """Built-in constructors in an unfrozen registry."""
    return build_default_registry(settings)


@pytest.fixture
def t(registry):
    """DSL namespace over the fixture registry."""
    return registry.namespace


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Keep structlog configuration from leaking between tests."""
    yield
    structlog.reset_defaults()
    LoggerRegistry._loggers.clear()

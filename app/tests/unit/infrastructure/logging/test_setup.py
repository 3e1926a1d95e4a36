"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger function
- Test logging suppression in test environment
"""

import logging

import pytest
import structlog

from infrastructure.logging import setup
from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
    _is_test_environment,
)


@pytest.fixture
def outside_pytest(monkeypatch, mock_settings):
    """Run configure_logging as it would outside pytest, then restore."""
    monkeypatch.setattr(setup, "_is_test_environment", lambda: False)
    monkeypatch.setattr(setup, "get_settings", lambda: mock_settings)
    yield mock_settings
    monkeypatch.undo()
    configure_logging()


@pytest.mark.unit
class TestIsTestEnvironment:
    def test_detects_pytest_in_sys_modules(self):
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    def test_returns_logger(self):
        logger = configure_logging()

        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_suppresses_in_test_env(self):
        configure_logging()

        assert logging.getLogger().level >= logging.CRITICAL

    def test_console_renderer_in_development(self, outside_pytest):
        configure_logging(is_production=False)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_renderer_in_production(self, outside_pytest):
        configure_logging(is_production=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_production_mode_defaults_to_settings(self, outside_pytest):
        outside_pytest.is_production = True
        configure_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)


@pytest.mark.unit
class TestGetModuleLogger:
    def test_binds_module_context(self):
        logger = get_module_logger()

        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_logging_methods_dont_raise(self):
        log = get_module_logger().bind(backend="cosmos")

        log.debug("gamestate_debug", extra="data")
        log.info("gamestate_store_initialized", store="CosmosGameStateStore")
        log.warning("gamestate_retry", attempt=1)
        log.error("gamestate_operation_failed", error_code="16500")

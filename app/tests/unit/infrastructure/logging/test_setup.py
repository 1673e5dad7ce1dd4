"""Unit tests for infrastructure.logging.setup module."""

import pytest

from infrastructure.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_logger,
    get_module_logger,
)


@pytest.mark.unit
class TestConfigureLogging:
    def test_detects_pytest(self):
        assert _is_test_environment() is True

    def test_returns_logger(self):
        logger = configure_logging()
        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_accepts_overrides(self):
        assert configure_logging(log_level="DEBUG", is_production=True) is not None
        assert configure_logging(log_level="INFO", is_production=False) is not None


@pytest.mark.unit
class TestGetLoggers:
    def test_get_logger_with_name(self):
        assert get_logger("modules.site_shell") is not None

    def test_get_logger_without_name(self):
        assert get_logger() is not None

    def test_get_module_logger_can_log(self):
        logger = get_module_logger()
        logger.info("test_event", language="it")

"""Tests for logging configuration."""

import logging

import pytest
import structlog

from usecase_core.config import AppConfig
from usecase_core.shared import logger as logger_module
from usecase_core.shared.logger import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _reset_logging():
    """Restore structlog and root logger state after each test."""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)


def _renderer() -> object:
    return structlog.get_config()["processors"][-1]


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_explicit_level(self):
        """Test that an explicit level is applied to the root logger."""
        configure_logging(log_level="warning", json_logs=False)

        assert logging.getLogger().level == logging.WARNING

    def test_console_renderer_by_default(self):
        """Test development mode renders to the console."""
        configure_logging(log_level="INFO", json_logs=False)

        assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)

    def test_json_renderer(self):
        """Test production mode renders JSON."""
        configure_logging(log_level="INFO", json_logs=True)

        assert isinstance(_renderer(), structlog.processors.JSONRenderer)

    def test_falls_back_to_app_config(self, monkeypatch: pytest.MonkeyPatch):
        """Test missing arguments are read from the application config."""
        config = AppConfig(log_level="DEBUG", json_logs=True)
        monkeypatch.setattr(logger_module, "get_app_config", lambda: config)

        configure_logging()

        assert logging.getLogger().level == logging.DEBUG
        assert isinstance(_renderer(), structlog.processors.JSONRenderer)

    def test_invalid_level_raises(self):
        """Test that an unknown level name is rejected."""
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging(log_level="LOUD")


class TestGetLogger:
    """Test suite for get_logger."""

    def test_returns_usable_logger(self):
        """Test the returned logger accepts structured key/value pairs."""
        with structlog.testing.capture_logs() as captured:
            get_logger("tests").info("Use case completed", use_case="GetItem")

        assert captured == [
            {"event": "Use case completed", "use_case": "GetItem", "log_level": "info"}
        ]

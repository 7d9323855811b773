"""Unit tests for logging configuration."""

import logging

from elevated.config import DemoSettings
from elevated.utils.logging_config import create_logging_config, setup_logging


class TestCreateLoggingConfig:
    """Test the dictConfig mapping."""

    def test_console_handler_enabled(self):
        config = create_logging_config(DemoSettings(log_level="DEBUG"))

        assert config["root"]["level"] == "DEBUG"
        assert config["root"]["handlers"] == ["console"]
        assert config["handlers"]["console"]["stream"] == "ext://sys.stderr"
        assert config["handlers"]["console"]["formatter"] == "console"

    def test_console_handler_disabled(self):
        config = create_logging_config(DemoSettings(log_to_console=False))

        assert "console" not in config["handlers"]
        assert config["root"]["handlers"] == ["null"]

    def test_existing_loggers_kept(self):
        config = create_logging_config(DemoSettings())
        assert config["disable_existing_loggers"] is False


class TestSetupLogging:
    """Test applying the configuration."""

    def test_setup_sets_package_level(self):
        setup_logging(DemoSettings(log_level="ERROR", log_to_console=False))
        assert logging.getLogger("elevated").level == logging.ERROR

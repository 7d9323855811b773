"""
Logging configuration for the demonstration runner.

The functional core never logs; only client code such as the demonstration
and the settings loader emits records through the standard logging tree.
"""

import logging
import logging.config
from typing import Any

from elevated.config import DemoSettings


def create_logging_config(settings: DemoSettings) -> dict[str, Any]:
    """
    Create the ``dictConfig`` mapping for the given settings.

    Args:
        settings: Validated demonstration settings

    Returns:
        Logging configuration dictionary
    """
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "console": {
                "format": "%(levelname)s - %(name)s - %(message)s",
            },
        },
        "handlers": {},
        "loggers": {
            "elevated": {
                "level": settings.log_level,
                "propagate": True,
            },
        },
        "root": {
            "level": settings.log_level,
            "handlers": [],
        },
    }

    if settings.log_to_console:
        config["handlers"]["console"] = {
            "class": "logging.StreamHandler",
            "level": settings.log_level,
            "formatter": "console",
            "stream": "ext://sys.stderr",
        }
        config["root"]["handlers"].append("console")
    else:
        config["handlers"]["null"] = {"class": "logging.NullHandler"}
        config["root"]["handlers"].append("null")

    return config


def setup_logging(settings: DemoSettings) -> None:
    """Apply logging configuration for the given settings."""
    logging.config.dictConfig(create_logging_config(settings))
    logging.getLogger(__name__).debug(
        "Logging configured at %s (console=%s)",
        settings.log_level,
        settings.log_to_console,
    )


__all__ = ["create_logging_config", "setup_logging"]

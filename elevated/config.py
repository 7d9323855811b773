"""
Configuration for the demonstration runner.

Settings are read from ``ELEVATED_*`` environment variables. Parsing never
raises: every step returns a Result, and the parsed fields are combined with
the package's own applicative combinators before pydantic validates the
final model.
"""

import logging
import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from elevated.fp.core import curry, flat_map, pure
from elevated.fp.types.result import Failure, Result, Success
from elevated.types.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "ELEVATED_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DemoSettings(BaseModel):
    """Inputs for the demonstration scenarios and logging setup."""

    model_config = ConfigDict(frozen=True)

    first_number: int = 1
    second_number: int = 2
    fail_first: bool = False
    fail_second: bool = False
    log_level: LogLevel = "INFO"
    log_to_console: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def create(cls, **fields: object) -> Result["DemoSettings", ConfigurationError]:
        """Create settings with validation."""
        try:
            return Success(cls(**fields))
        except ValidationError as e:
            first = e.errors()[0]
            field_name = ".".join(str(part) for part in first["loc"])
            return Failure(
                ConfigurationError(
                    f"Invalid {field_name}: {first['msg']}",
                    field_name=field_name,
                    invalid_value=str(first.get("input")),
                )
            )


# Environment variable parsing
def parse_env_var(
    key: str, default: str | None = None, environ: Mapping[str, str] | None = None
) -> str | None:
    """Parse environment variable with optional default."""
    env = os.environ if environ is None else environ
    return env.get(key, default)


def parse_bool_env(
    key: str, default: bool = False, environ: Mapping[str, str] | None = None
) -> bool:
    """Parse boolean environment variable."""
    value = parse_env_var(key, environ=environ)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


def parse_int_env(
    key: str, default: int, environ: Mapping[str, str] | None = None
) -> Result[int, ConfigurationError]:
    """Parse integer environment variable."""
    value = parse_env_var(key, environ=environ)
    if value is None or value == "":
        return Success(default)
    try:
        return Success(int(value))
    except ValueError:
        return Failure(
            ConfigurationError(
                f"Invalid integer for {key}: {value}",
                field_name=key,
                invalid_value=value,
            )
        )


def _numbers(first_number: int, second_number: int) -> dict[str, int]:
    return {"first_number": first_number, "second_number": second_number}


def build_settings_from_env(
    environ: Mapping[str, str] | None = None,
) -> Result[DemoSettings, ConfigurationError]:
    """Build demonstration settings from environment variables."""
    first = parse_int_env(f"{ENV_PREFIX}FIRST_NUMBER", 1, environ)
    second = parse_int_env(f"{ENV_PREFIX}SECOND_NUMBER", 2, environ)

    numbers = pure(curry(_numbers)) @ first @ second

    settings = flat_map(
        lambda fields: DemoSettings.create(
            **fields,
            fail_first=parse_bool_env(f"{ENV_PREFIX}FAIL_FIRST", False, environ),
            fail_second=parse_bool_env(f"{ENV_PREFIX}FAIL_SECOND", False, environ),
            log_level=parse_env_var(f"{ENV_PREFIX}LOG_LEVEL", "INFO", environ),
            log_to_console=parse_bool_env(
                f"{ENV_PREFIX}LOG_TO_CONSOLE", True, environ
            ),
        ),
        numbers,
    )

    if isinstance(settings, Failure):
        logger.debug("Settings rejected: %s", settings.error.get_error_context())
    return settings


__all__ = [
    "ENV_PREFIX",
    "DemoSettings",
    "build_settings_from_env",
    "parse_bool_env",
    "parse_env_var",
    "parse_int_env",
]

"""
Exception hierarchy used as failure causes.

Failure causes travel inside ``Failure`` values rather than being raised,
so each error carries enough context to be reported where the Result is
finally inspected.
"""

from datetime import UTC, datetime

# Type alias for error context data
type ErrorContextData = str | int | float | bool | datetime | None
type ErrorContextDict = dict[str, ErrorContextData]


class ElevatedError(Exception):
    """
    Base exception for all package errors.

    Provides common attributes for error reporting and context tracking.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: ErrorContextDict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.timestamp = datetime.now(UTC)

    def get_error_context(self) -> ErrorContextDict:
        """Get structured error context for logging and debugging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": str(self.context),
            "timestamp": self.timestamp.isoformat(),
        }


class ExampleError(ElevatedError):
    """Marker cause returned by the demonstration number source."""

    def __init__(self, message: str = "Number unavailable", **kwargs):
        super().__init__(message, **kwargs)


class ConfigurationError(ElevatedError):
    """Invalid or unparseable configuration value."""

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        invalid_value: ErrorContextData = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.field_name = field_name
        self.invalid_value = invalid_value

    def get_error_context(self) -> ErrorContextDict:
        context = super().get_error_context()
        context.update(
            {
                "field_name": self.field_name,
                "invalid_value": (
                    str(self.invalid_value) if self.invalid_value is not None else None
                ),
            }
        )
        return context


__all__ = [
    "ConfigurationError",
    "ElevatedError",
    "ErrorContextData",
    "ErrorContextDict",
    "ExampleError",
]

"""Shared types for the elevated package."""

from .exceptions import ConfigurationError, ElevatedError, ExampleError

__all__ = ["ConfigurationError", "ElevatedError", "ExampleError"]

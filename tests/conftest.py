"""Pytest configuration and shared fixtures for the elevated test suite."""

import logging
from collections.abc import Generator

import pytest
from hypothesis import settings

settings.register_profile("elevated", max_examples=200)
settings.load_profile("elevated")


# Pytest configuration
def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "property: mark test as a property-based test")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


@pytest.fixture(autouse=True)
def _restore_package_log_level() -> Generator[None, None, None]:
    """Undo logger level changes made by setup_logging."""
    logger = logging.getLogger("elevated")
    level = logger.level
    yield
    logger.setLevel(level)

"""Shared pytest fixtures and configuration."""

import logging

import pytest

from unicourse.registry import DEFAULT_SEED, Registry, apply_seed


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def registry() -> Registry:
    """Create an empty Registry with default limits."""
    return Registry()


@pytest.fixture
def seeded_registry() -> Registry:
    """Create a Registry filled with the default seed data."""
    registry = Registry()
    apply_seed(registry, DEFAULT_SEED)
    return registry


@pytest.fixture(autouse=True)
def reset_unicourse_logger():
    """Leave the unicourse logger without handlers between tests."""
    yield
    logger = logging.getLogger("unicourse")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.propagate = True

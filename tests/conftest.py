"""Shared pytest fixtures for fixtureworks tests.

This module provides fixtures for:
- Test environment variables
- The process-wide sequence store (via fixtureworks.pytest_plugin)
- Example factories

Usage:
    def test_something(app_factory, fresh_sequences):
        article = app_factory.build("article")
        assert article["title"] == "Post Title 0"
"""

import os
from collections.abc import Generator

import pytest

# Re-exported so the fixtures exist even when the plugin entry point is not installed
from fixtureworks.pytest_plugin import fixtureworks_sequences, fresh_sequences  # noqa: F401
from fixtureworks.config.settings import get_settings
from tests.factories import AppFactory, RecordingFactory

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def configure_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables.

    Clears fixtureworks variables inherited from the shell so defaults apply.
    """
    original_env = os.environ.copy()

    for key in list(os.environ):
        if key.startswith("FIXTUREWORKS_"):
            del os.environ[key]
    get_settings.cache_clear()

    yield

    os.environ.clear()
    os.environ.update(original_env)
    get_settings.cache_clear()


@pytest.fixture
def clean_settings() -> Generator[None, None, None]:
    """Clear the settings cache around a test that patches the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Factory Fixtures
# =============================================================================


@pytest.fixture
def app_factory() -> AppFactory:
    """Provide the example factory set."""
    return AppFactory()


@pytest.fixture
def recording_factory() -> RecordingFactory:
    """Provide a factory whose save_record() stores records in memory."""
    return RecordingFactory()

"""Tests for the fixtureworks pytest plugin fixtures."""

import os
from collections.abc import Generator
from unittest.mock import patch

import pytest
import structlog

from fixtureworks.config.settings import get_settings
from fixtureworks.pytest_plugin import start_session_store
from fixtureworks.sequence import next_value
from fixtureworks.sequence.store import SequenceStore, get_store


def host_processor(logger, method_name, event_dict):
    """Processor standing in for a host project's own structlog pipeline."""
    return event_dict


@pytest.fixture
def host_structlog_config() -> Generator[None, None, None]:
    """Install a host structlog configuration, restoring the previous one after."""
    saved = structlog.get_config()
    structlog.configure(processors=[host_processor, structlog.processors.KeyValueRenderer()])
    get_settings.cache_clear()
    yield
    structlog.configure(**saved)
    get_settings.cache_clear()


def test_session_store_is_started(fixtureworks_sequences: SequenceStore) -> None:
    """
    Given: A test session
    When: The session fixture is requested
    Then: It is the started process-wide store
    """
    assert fixtureworks_sequences is get_store()
    assert fixtureworks_sequences.is_started is True


def test_fresh_sequences_restarts_counters(fresh_sequences: SequenceStore) -> None:
    """
    Given: Values consumed by earlier tests
    When: fresh_sequences is requested
    Then: Every sequence starts again at 0
    """
    assert next_value("email") == 0
    assert fresh_sequences.peek("email") == 1


def test_fresh_sequences_keeps_the_shared_store_started(fresh_sequences: SequenceStore) -> None:
    """Resetting counters leaves the same live store in place for later tests."""
    assert fresh_sequences is get_store()
    assert get_store().is_started is True


def test_counters_persist_between_tests_without_reset() -> None:
    """Without fresh_sequences, values keep increasing across tests."""
    first = next_value("plugin-monotonic")
    second = next_value("plugin-monotonic")

    assert second == first + 1


@pytest.mark.usefixtures("host_structlog_config")
class TestSessionLogging:
    """The plugin leaves the host project's logging alone by default."""

    def test_host_structlog_config_survives_session_start(self) -> None:
        """
        Given: A host project that configured structlog itself
        When: The plugin starts the session store
        Then: The host processors are still configured
        """
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("FIXTUREWORKS_CONFIGURE_LOGGING", None)
            get_settings.cache_clear()

            store = start_session_store()

        assert store is get_store()
        assert host_processor in structlog.get_config()["processors"]

    def test_opt_in_configures_logging(self) -> None:
        """
        Given: FIXTUREWORKS_CONFIGURE_LOGGING=true
        When: The plugin starts the session store
        Then: fixtureworks' own pipeline replaces the host configuration
        """
        with patch.dict(os.environ, {"FIXTUREWORKS_CONFIGURE_LOGGING": "true"}):
            get_settings.cache_clear()

            start_session_store()

        processors = structlog.get_config()["processors"]
        assert host_processor not in processors
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

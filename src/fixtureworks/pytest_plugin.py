"""pytest plugin: run the sequence store for the whole test session.

Registered through the `pytest11` entry point, so installing fixtureworks is
enough. The session fixture starts the process-wide sequence store. Logging
is left to the host project unless FIXTUREWORKS_CONFIGURE_LOGGING is set.

Counters are not reset between tests; request the `fresh_sequences`
fixture in a test that needs them to start at 0.
"""

from collections.abc import Generator

import pytest
import structlog

from fixtureworks.config.logging import configure_logging
from fixtureworks.config.settings import get_settings
from fixtureworks.sequence.store import SequenceStore, get_store

log = structlog.get_logger(__name__)


def start_session_store() -> SequenceStore:
    """Start the shared store, configuring logging first only when opted in."""
    if get_settings().configure_logging:
        configure_logging()

    store = get_store()
    store.start()
    log.debug("pytest_sequence_store_ready")
    return store


@pytest.fixture(scope="session", autouse=True)
def fixtureworks_sequences() -> Generator[SequenceStore, None, None]:
    """Start the process-wide sequence store and stop it after the session."""
    store = start_session_store()

    yield store

    store.stop()


@pytest.fixture
def fresh_sequences(fixtureworks_sequences: SequenceStore) -> SequenceStore:
    """Reset every sequence before the requesting test."""
    fixtureworks_sequences.reset()
    return fixtureworks_sequences

"""Process-wide keyed counters for unique fixture values.

Every factory in a process draws from the same store, so a value such as
"me-3@foo.com" is handed out once per run no matter which test or thread
asked for it. Counters start at 0 and only move forward; nothing resets them
between tests unless reset() is called explicitly.

Thread-safe via threading.Lock: the read and the increment of a counter
happen inside one critical section.

Example:
    ```python
    from fixtureworks.sequence import store

    store.start()
    store.next_value("email")  # 0
    store.next_value("email")  # 1
    store.next_value("email", lambda n: f"me-{n}@foo.com")  # "me-2@foo.com"
    ```
"""

import threading
from collections.abc import Callable, Hashable
from typing import Any, ClassVar, TypeVar, overload

import structlog

from fixtureworks.config.settings import get_settings
from fixtureworks.constants.sequence import FIRST_SEQUENCE_VALUE
from fixtureworks.core.exceptions import (
    SequenceAlreadyStartedError,
    SequenceNotStartedError,
)

log = structlog.get_logger(__name__)

T = TypeVar("T")


class SequenceStore:
    """Owner of the counter table.

    The table is None until start() is called; callers never touch it
    directly. Use get_store() for the shared instance, or construct a private
    store in tests that need isolation.
    """

    # Shared instance used by the module-level functions
    _instance: ClassVar["SequenceStore | None"] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counters: dict[Hashable, int] | None = None

    @classmethod
    def get_instance(cls) -> "SequenceStore":
        """Get or create the shared store (not started)."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @property
    def is_started(self) -> bool:
        """Whether start() has been called and stop() has not."""
        return self._counters is not None

    def start(self) -> None:
        """Initialize the counter table.

        A second start() on a live store is a no-op unless the
        `strict_sequence_start` setting is enabled, in which case it raises.

        Raises:
            SequenceAlreadyStartedError: Store is live and strict start is on.
        """
        strict = get_settings().strict_sequence_start
        with self._lock:
            if self._counters is not None:
                if strict:
                    log.warning("sequence_store_start_rejected", reason="already_started")
                    raise SequenceAlreadyStartedError(
                        "Sequence store is already started; call stop() first"
                    )
                log.debug("sequence_store_already_started")
                return
            self._counters = {}
        log.debug("sequence_store_started")

    def stop(self) -> None:
        """Tear down the counter table. Safe to call on a stopped store."""
        with self._lock:
            sequences = 0 if self._counters is None else len(self._counters)
            self._counters = None
        log.debug("sequence_store_stopped", sequences=sequences)

    def reset(self, key: Hashable | None = None) -> None:
        """Restart one sequence, or all of them, at 0.

        Args:
            key: Sequence to reset. None resets every sequence.

        Raises:
            SequenceNotStartedError: Store has not been started.
        """
        with self._lock:
            counters = self._require_started()
            if key is None:
                counters.clear()
            else:
                counters.pop(key, None)
        log.debug("sequence_store_reset", key=key)

    def peek(self, key: Hashable) -> int:
        """Return the value the next call for `key` will hand out, without consuming it."""
        with self._lock:
            return self._require_started().get(key, FIRST_SEQUENCE_VALUE)

    @overload
    def next(self, key: Hashable) -> int: ...

    @overload
    def next(self, key: Hashable, formatter: Callable[[int], T]) -> T: ...

    def next(self, key: Hashable, formatter: Callable[[int], Any] | None = None) -> Any:
        """Consume the next integer of sequence `key`.

        Args:
            key: Sequence name. Unseen keys start at 0.
            formatter: Optional callable applied to the integer. The integer is
                consumed exactly once whatever the formatter returns.

        Returns:
            The integer, or formatter(integer).

        Raises:
            SequenceNotStartedError: Store has not been started.
        """
        with self._lock:
            counters = self._require_started()
            value = counters.get(key, FIRST_SEQUENCE_VALUE)
            counters[key] = value + 1

        if formatter is None:
            return value
        return formatter(value)

    def _require_started(self) -> dict[Hashable, int]:
        # Caller holds self._lock
        if self._counters is None:
            raise SequenceNotStartedError(
                "Sequence store is not started. Call fixtureworks.start() at "
                "process startup, or install fixtureworks with its pytest plugin."
            )
        return self._counters


def get_store() -> SequenceStore:
    """Return the process-wide store."""
    return SequenceStore.get_instance()


def start() -> None:
    """Start the process-wide store."""
    get_store().start()


def stop() -> None:
    """Stop the process-wide store."""
    get_store().stop()


def reset(key: Hashable | None = None) -> None:
    """Reset one or all sequences of the process-wide store."""
    get_store().reset(key)


def next_value(key: Hashable, formatter: Callable[[int], Any] | None = None) -> Any:
    """Consume the next value of `key` from the process-wide store."""
    return get_store().next(key, formatter)

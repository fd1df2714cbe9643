"""Unique-value sequences shared by every factory in the process."""

from fixtureworks.sequence.helpers import sequence
from fixtureworks.sequence.store import (
    SequenceStore,
    get_store,
    next_value,
    reset,
    start,
    stop,
)

__all__ = [
    "SequenceStore",
    "get_store",
    "next_value",
    "reset",
    "sequence",
    "start",
    "stop",
]

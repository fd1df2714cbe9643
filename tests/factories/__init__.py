"""Test factories built on fixtureworks.

These factories define the records the unit tests build.
"""

from tests.factories.app import Account, Address, AppFactory, RecordingFactory

__all__ = [
    "Account",
    "Address",
    "AppFactory",
    "RecordingFactory",
]

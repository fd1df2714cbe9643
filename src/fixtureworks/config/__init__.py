"""Configuration module for fixtureworks.

Usage:
    from fixtureworks.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.sequence_separator)

Note:
    Settings are read lazily so that environment variables set by a
    conftest.py before the first build are honored. Call
    `get_settings.cache_clear()` after changing them mid-session.
"""

from fixtureworks.config.logging import configure_logging
from fixtureworks.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]

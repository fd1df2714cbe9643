"""Tests for settings configuration."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from fixtureworks.config.settings import Settings, get_settings


@pytest.mark.usefixtures("clean_settings")
class TestSettings:
    """Test settings loading and validation."""

    def test_settings_defaults(self) -> None:
        """
        Given: No fixtureworks env vars
        When: Settings is created
        Then: Defaults are applied
        """
        settings = Settings(_env_file=None)

        assert settings.log_level == "WARNING"
        assert settings.debug is False
        assert settings.configure_logging is False
        assert settings.sequence_separator == " "
        assert settings.strict_sequence_start is False

    def test_settings_loads_from_env(self) -> None:
        """
        Given: Prefixed environment variables are set
        When: Settings is loaded
        Then: Values are correctly parsed
        """
        env_vars = {
            "FIXTUREWORKS_LOG_LEVEL": "debug",
            "FIXTUREWORKS_DEBUG": "true",
            "FIXTUREWORKS_CONFIGURE_LOGGING": "true",
            "FIXTUREWORKS_SEQUENCE_SEPARATOR": "-",
            "FIXTUREWORKS_STRICT_SEQUENCE_START": "1",
        }

        with patch.dict(os.environ, env_vars, clear=True):
            get_settings.cache_clear()
            settings = get_settings()

            assert settings.log_level == "DEBUG"
            assert settings.debug is True
            assert settings.configure_logging is True
            assert settings.sequence_separator == "-"
            assert settings.strict_sequence_start is True

    def test_unprefixed_vars_are_ignored(self) -> None:
        """
        Given: A DEBUG variable without the FIXTUREWORKS_ prefix
        When: Settings is loaded
        Then: It does not leak into fixtureworks settings
        """
        with patch.dict(os.environ, {"DEBUG": "true"}, clear=True):
            settings = Settings(_env_file=None)

            assert settings.debug is False

    def test_invalid_log_level_rejected(self) -> None:
        """
        Given: An unknown log level
        When: Settings is loaded
        Then: ValidationError is raised
        """
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD", _env_file=None)  # type: ignore[arg-type]

    def test_get_settings_is_cached(self) -> None:
        """
        Given: get_settings called twice
        When: Comparing results
        Then: The same instance is returned
        """
        assert get_settings() is get_settings()

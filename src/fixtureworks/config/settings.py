"""Library settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """fixtureworks configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FIXTUREWORKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Minimum log level"
    )
    debug: bool = Field(default=False, description="Pretty console logs instead of JSON")
    configure_logging: bool = Field(
        default=False,
        description="Let the pytest plugin call configure_logging() at session start",
    )

    # Sequences
    sequence_separator: str = Field(
        default=" ",
        description="Joins a sequence name and its counter in the shortcut form",
    )
    strict_sequence_start: bool = Field(
        default=False,
        description="Raise when the sequence store is started twice",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

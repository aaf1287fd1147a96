"""
Configuration — typed, validated settings loaded from the environment.

Uses pydantic-settings so an application embedding abortable can tune it
without code changes:

    ABORTABLE_LOG_LEVEL=DEBUG
    ABORTABLE_TRACE=true
    ABORTABLE_NOT_OK_MESSAGE="condition failed"

Only environment variables are read; the library never opens files.

get_settings() validates strictly and is meant for start-up code.
The abort path and try boundaries read effective_settings(), which falls
back to the defaults when the environment is invalid, so a bad variable
can never turn a contained failure into a crash.
"""

from __future__ import annotations

import logging
from functools import lru_cache

import structlog
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AbortableSettings(BaseSettings):
    """
    Library settings.

    Load order (highest priority first):
      1. Environment variables (ABORTABLE_*)
      2. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="ABORTABLE_",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Minimum level for structlog output")
    trace: bool = Field(default=False, description="Emit debug events for aborts and recoveries")
    not_ok_message: str = Field(
        default="not ok",
        min_length=1,
        description="Abort message for a boolean failure without message arguments",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept standard logging level names, case-insensitively."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> AbortableSettings:
    return AbortableSettings()


@lru_cache(maxsize=1)
def effective_settings() -> AbortableSettings:
    """
    Settings for the abort path: get_settings(), or the defaults when the
    environment does not validate. The rejection is logged once.
    """
    try:
        return get_settings()
    except ValidationError as e:
        structlog.get_logger("abortable.config").warning(
            "settings.invalid", error=str(e), fallback="defaults"
        )
        return AbortableSettings.model_construct()


def reload_settings() -> AbortableSettings:
    """Drop the cached settings and read the environment again."""
    get_settings.cache_clear()
    effective_settings.cache_clear()
    return get_settings()

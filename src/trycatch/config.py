"""Environment-based configuration using pydantic-settings.

Settings only control diagnostic logging of captured failures. They never
change what the capture helpers return.

Example:
    >>> from trycatch.config import get_settings
    >>> get_settings().log_captured
    False

    # Or with environment variables:
    # TRYCATCH_LOG_CAPTURED=true
    # TRYCATCH_LOG_LEVEL=WARNING
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TryCatchSettings(BaseSettings):
    """Root settings, loaded from ``TRYCATCH_``-prefixed environment variables.

    Example environment variables:
        TRYCATCH_LOG_CAPTURED=true
        TRYCATCH_LOG_LEVEL=INFO
        TRYCATCH_LOG_TRACEBACK=true
        TRYCATCH_LOGGER_NAME=myapp.trycatch
    """

    model_config = SettingsConfigDict(
        env_prefix="TRYCATCH_",
        extra="ignore",
        validate_default=True,
    )

    log_captured: bool = Field(default=False, description="Log each captured failure")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "DEBUG"
    log_traceback: bool = Field(default=False, description="Attach exc_info to capture records")
    logger_name: str = Field(default="trycatch", min_length=1)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @computed_field
    @property
    def level_no(self) -> int:
        """Numeric logging level for log_level."""
        return getattr(logging, self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> TryCatchSettings:
    """Get the global settings instance (cached)."""
    return TryCatchSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() rereads the environment."""
    get_settings.cache_clear()

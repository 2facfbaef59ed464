"""Pydantic-settings configuration for entitymeta.

Settings are read from ``ENTITYMETA_*`` environment variables or a ``.env`` file. They only
shape the ambient behavior of the library (logging); metadata construction itself takes no
configuration beyond the options given to each decorator.
"""

from functools import lru_cache
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ENTITYMETA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_renderer: Literal["console", "json"] = "console"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        # case_sensitive only applies to variable names
        return value.upper() if isinstance(value, str) else value


@lru_cache(1)
def get_settings() -> Settings:
    """Process settings. Cached, call ``get_settings.cache_clear()`` to reload them."""
    return Settings()

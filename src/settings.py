"""
Pydantic Settings for the URL builder.

Values are loaded from environment variables (and an optional `.env` file)
and validated on load. Collaborators accept explicit overrides for every
setting; these are only the defaults.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings
from pydantic_settings import SettingsConfigDict

from src.core.constants import (
    DEFAULT_DOCUMENT_EXTENSION,
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    DEFAULT_INDEX_DOCUMENT,
    DEFAULT_LOCALE,
)


class Settings(PydanticBaseSettings):
    """
    Application settings using Pydantic for validation and environment loading.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="",
        validate_assignment=True,
        extra="ignore",
    )

    base_url: Optional[str] = Field(
        default=None,
        description=(
            "Absolute site URL without trailing slash, e.g. https://example.com. "
            "Required for static site builds and body fetches."
        ),
    )

    locales: list[str] = Field(
        default=[DEFAULT_LOCALE],
        description="Locales to enumerate when building a static site",
    )

    exclude_types: list[str] = Field(
        default=[],
        description="Content types left out of URL enumeration",
    )

    default_document_extension: str = Field(
        default=DEFAULT_DOCUMENT_EXTENSION,
        description="Extension appended to static paths that have none",
    )

    index_document: str = Field(
        default=DEFAULT_INDEX_DOCUMENT,
        description="File name written for the site root and directory URLs",
    )

    fetch_timeout_seconds: float = Field(
        default=DEFAULT_FETCH_TIMEOUT_SECONDS,
        description="Timeout for a single in-process page fetch (in seconds)",
        gt=0,
    )

    # Debug settings
    debug_logs_enabled: bool = Field(
        default=False, description="Enable debug logging output"
    )

    @field_validator("base_url", mode="before")
    def strip_base_url(cls, v: object) -> Optional[str]:
        """Treat an empty base URL as unset and drop any trailing slash."""
        if v is None:
            return None
        v = str(v).strip()
        if not v:
            return None
        return v.rstrip("/")

    @field_validator("default_document_extension")
    def ensure_leading_dot(cls, v: str) -> str:
        if not v.startswith("."):
            return f".{v}"
        return v

    @field_validator("debug_logs_enabled", mode="before")
    def parse_debug_logs(cls, v: object) -> bool:
        """Parse debug logs from various string formats with strict validation"""
        if isinstance(v, str):
            lower_v = v.lower()
            if lower_v in ("true", "1", "yes", "on"):
                return True
            elif lower_v in ("false", "0", "no", "off"):
                return False
            else:
                raise ValueError(
                    f"Invalid boolean value: '{v}'. Must be one of: true, false, 1, "
                    "0, yes, no, on, off"
                )
        return bool(v)


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings instance (singleton pattern).

    Returns:
        Settings: The application settings instance
    """
    return Settings()


def reload_settings():
    """
    Reload settings by clearing the cache.
    Useful for testing and dynamic configuration changes.
    """
    get_settings.cache_clear()

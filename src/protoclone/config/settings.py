"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from protoclone.config import ReflectionSettings, get_settings

    # Load from environment variables (PROTOCLONE_*)
    settings = get_settings()

    # Or override with explicit values
    legacy = ReflectionSettings(full_reflection=False)
"""

from __future__ import annotations

from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class ReflectionSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for property enumeration.

    Attributes:
        full_reflection: Enumerate non-enumerable own properties too. When
            disabled, enumeration degrades to enumerable keys only, as on a
            host without full reflection.

    Environment Variables:
        PROTOCLONE_FULL_REFLECTION
    """

    model_config = SettingsConfigDict(
        env_prefix="PROTOCLONE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    full_reflection: bool = True


@cache
def get_settings() -> ReflectionSettings:
    """Return the process-wide settings, loaded from the environment on first use."""
    return ReflectionSettings()

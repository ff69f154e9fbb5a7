"""Configuration module using Pydantic Settings.

Usage:
    from protoclone.config import ReflectionSettings

    settings = ReflectionSettings(full_reflection=False)
"""

from protoclone.config.settings import ReflectionSettings, get_settings

__all__ = [
    "ReflectionSettings",
    "get_settings",
]

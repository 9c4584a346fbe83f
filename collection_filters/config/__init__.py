"""Service configuration."""

from .settings import Settings, get_settings, DEFAULT_LOCALES

__all__ = [
    "Settings",
    "get_settings",
    "DEFAULT_LOCALES",
]

"""Configuration module - public API.

Centralized configuration for the localization toolkit using Pydantic
BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    LocalizationSettings: Catalog location and default language
    get_settings: Cached Settings singleton
"""

from localization.configuration.localization import (
    DEFAULT_LANGUAGE,
    DEFAULT_RESOURCE_DIR,
    LocalizationSettings,
)
from localization.configuration.settings import Settings, get_settings

__all__ = [
    "DEFAULT_LANGUAGE",
    "DEFAULT_RESOURCE_DIR",
    "LocalizationSettings",
    "Settings",
    "get_settings",
]

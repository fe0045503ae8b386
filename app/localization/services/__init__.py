"""Process-wide service providers."""

from localization.services.providers import (
    get_localization_holder,
    get_localizer_class,
    get_settings,
)

__all__ = [
    "get_localization_holder",
    "get_localizer_class",
    "get_settings",
]

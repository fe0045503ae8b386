"""
Factory functions for dependency injection.

Provides process-wide singleton providers for the localization services.
"""

from functools import lru_cache
from typing import Type

from localization.configuration import Settings, get_settings
from localization.i18n.bindings import bind_localizations
from localization.i18n.bundles import LocalizationHolder
from localization.i18n.factory import create_localization_holder
from localization.i18n.localizer import LanguageLocalizer


@lru_cache
def get_localization_holder() -> LocalizationHolder:
    """
    Get process-wide localization holder singleton.

    Bundles are read-only once loaded, so one holder serves every caller.

    Returns:
        LocalizationHolder: Cached holder loaded from the configured catalogs.
    """
    return create_localization_holder(settings=get_settings().localization)


@lru_cache
def get_localizer_class() -> Type[LanguageLocalizer]:
    """
    Get the accessor class bound from the configured `default` catalogs.

    Usage:
        Localizer = get_localizer_class()
        localizer = Localizer(get_localization_holder(), "fr")
        localizer.messages_welcome_user(name="Ada")

    Returns:
        Type[LanguageLocalizer]: Cached bound accessor class.
    """
    return bind_localizations(settings=get_settings().localization)


__all__ = [
    "Settings",
    "get_localization_holder",
    "get_localizer_class",
    "get_settings",
]

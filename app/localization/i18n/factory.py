"""Factory functions for creating localization components.

Provides the startup entry point: compile the schema catalogs, check the
default language is complete and load every language bundle.
"""

from pathlib import Path
from typing import Optional, Type

from localization.configuration import LocalizationSettings, get_settings
from localization.i18n.bindings import bind_localizations
from localization.i18n.bundles import LocalizationHolder
from localization.i18n.localizer import LanguageLocalizer
from localization.logging import get_module_logger

logger = get_module_logger()


def create_localization_holder(
    translations_dir: Optional[Path] = None,
    default_language: Optional[str] = None,
    use_isolating: Optional[bool] = None,
    settings: Optional[LocalizationSettings] = None,
) -> LocalizationHolder:
    """Create a LocalizationHolder from configuration.

    Args:
        translations_dir: Catalog root (default: TRANSLATION_DIR or ./localizations)
        default_language: Fallback language (default: DEFAULT_LANG)
        use_isolating: Unicode isolation around placeables (default: LOCALIZATION_USE_ISOLATING)
        settings: Optional settings override

    Returns:
        LocalizationHolder: Loaded bundles for every language

    Raises:
        LocalizationError: If any catalog fails to load

    Usage:
        holder = create_localization_holder()
        holder = create_localization_holder(translations_dir=Path("/srv/localizations"))
    """
    settings = settings or get_settings().localization
    holder = LocalizationHolder.load(
        translations_dir=translations_dir,
        default_language=default_language,
        use_isolating=use_isolating,
        settings=settings,
    )
    logger.info(
        "localization_holder_created",
        default_language=holder.default_language,
        language_count=len(holder.bundles),
    )
    return holder


def bootstrap_localizations(
    localizer_class: Optional[Type[LanguageLocalizer]] = None,
    translations_dir: Optional[Path] = None,
    default_language: Optional[str] = None,
    settings: Optional[LocalizationSettings] = None,
) -> LocalizationHolder:
    """Validate the catalogs and load them, to be called once at startup.

    Any error raised here is an authoring defect and should abort the
    process.

    Args:
        localizer_class: Accessor class to validate, bound from the
            default catalogs if not given (e.g. a generated module's class)
        translations_dir: Catalog root (default: TRANSLATION_DIR or ./localizations)
        default_language: Fallback language (default: DEFAULT_LANG)
        settings: Optional settings override

    Returns:
        LocalizationHolder: Loaded bundles for every language

    Raises:
        IncompleteDefaultBundleError: If the default language lacks entries
        LocalizationError: If any catalog fails to load or resolve
    """
    settings = settings or get_settings().localization
    if localizer_class is None:
        localizer_class = bind_localizations(translations_dir, settings=settings)

    localizer_class.validate_default_bundle_complete(
        translations_dir=translations_dir,
        default_language=default_language,
        settings=settings,
    )
    return create_localization_holder(
        translations_dir=translations_dir,
        default_language=default_language,
        settings=settings,
    )

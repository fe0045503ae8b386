"""Runtime bundle assembly.

One bundle is built per language directory: the `default` catalogs are
added first and the language's own catalogs override them, so every
bundle carries at least the default entries.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from fluent.runtime import FluentBundle
from fluent.syntax import ast

from localization.configuration import LocalizationSettings, get_settings
from localization.i18n.errors import LocalizationLoadingError
from localization.i18n.loader import (
    base_path,
    check_duplicate_entries,
    get_default_language,
    load_resources_from_folder,
    parse_language_identifier,
)
from localization.i18n.models import DEFAULT_DIR, Resource
from localization.logging import bind_localization_context, get_module_logger

logger = get_module_logger()


class LocalizationHolder:
    """Loaded bundles for every language plus the default language.

    Built once at startup and shared read-only afterwards.

    Attributes:
        bundles: Read-only mapping of language identifier to bundle.
        default_language: Identifier of the fallback language.
    """

    def __init__(self, bundles: Mapping[str, FluentBundle], default_language: str):
        if default_language not in bundles:
            raise LocalizationLoadingError(
                f"No localization bundle was loaded for the default language {default_language}"
            )
        self.bundles: Mapping[str, FluentBundle] = MappingProxyType(dict(bundles))
        self.default_language = default_language

    @classmethod
    def load(
        cls,
        translations_dir: Optional[Path] = None,
        default_language: Optional[str] = None,
        use_isolating: Optional[bool] = None,
        settings: Optional[LocalizationSettings] = None,
    ) -> "LocalizationHolder":
        """Load a bundle for every language directory under the catalog root.

        Args:
            translations_dir: Catalog root, defaults to the configured one.
            default_language: Fallback language, defaults to the configured one.
            use_isolating: Whether placeables get Unicode isolation marks.
            settings: Optional settings override.

        Returns:
            LocalizationHolder with one bundle per valid language directory.

        Raises:
            LocalizationLoadingError: If catalogs cannot be read, the default
                language is invalid or has no directory.
            CatalogParseError: If a catalog has syntax errors.
            DuplicateEntryError: If a language defines an entry twice.
        """
        settings = settings or get_settings().localization
        root = Path(translations_dir) if translations_dir is not None else base_path(settings)
        if default_language is None:
            default_language = get_default_language(settings)
        else:
            try:
                parse_language_identifier(default_language)
            except ValueError as e:
                raise LocalizationLoadingError(
                    f"Invalid default language: {default_language}"
                ) from e
        if use_isolating is None:
            use_isolating = settings.USE_ISOLATING

        logger.info("loading_localizations", path=str(root), default_language=default_language)

        defaults = load_resources_from_folder(root / DEFAULT_DIR)
        check_duplicate_entries(defaults, DEFAULT_DIR)

        try:
            items = sorted(root.iterdir(), key=lambda item: item.name)
        except OSError as e:
            raise LocalizationLoadingError(
                f"Failed to read localizations base dir {root}"
            ) from e

        bundles: Dict[str, FluentBundle] = {}
        for item in items:
            if not item.is_dir():
                logger.debug("skipping_non_directory", path=str(item))
                continue

            if item.name == DEFAULT_DIR:
                continue

            try:
                parse_language_identifier(item.name)
            except ValueError:
                logger.warning("skipping_invalid_language", path=str(item))
                continue

            bundles[item.name] = load_bundle(
                root, item.name, defaults, use_isolating, fallback_language=default_language
            )

        if default_language not in bundles:
            raise LocalizationLoadingError(
                f"Default language {default_language} has no localization directory in {root}"
            )

        logger.info("loaded_localizations", languages=sorted(bundles))
        return cls(bundles, default_language)

    @property
    def languages(self) -> List[str]:
        """Loaded language identifiers, sorted."""
        return sorted(self.bundles)

    def get_bundle(self, language: Optional[str]) -> FluentBundle:
        """Bundle for a language, or the default bundle if it is not loaded."""
        if language is not None and language in self.bundles:
            return self.bundles[language]
        return self.get_default_bundle()

    def get_default_bundle(self) -> FluentBundle:
        """Bundle of the default language."""
        return self.bundles[self.default_language]


def create_bundle(
    language: str,
    use_isolating: bool = False,
    fallback_language: Optional[str] = None,
) -> FluentBundle:
    """Empty bundle for a language.

    The fallback language follows in the locale chain, so number and plural
    formatting still has locale data for languages babel does not know.
    """
    locales = [language]
    if fallback_language and fallback_language != language:
        locales.append(fallback_language)
    return FluentBundle(locales, use_isolating=use_isolating)


def load_bundle(
    root: Path,
    language: str,
    defaults: Iterable[Resource],
    use_isolating: bool = False,
    fallback_language: Optional[str] = None,
) -> FluentBundle:
    """Assemble the bundle of one language.

    The language's catalogs are checked for duplicates on their own first,
    since adding them over the defaults uses override semantics and would
    hide such mistakes.

    Args:
        root: Catalog root directory.
        language: Language directory name.
        defaults: Catalogs of the `default` directory.
        use_isolating: Whether placeables get Unicode isolation marks.
        fallback_language: Locale used for formatting data the language lacks.

    Returns:
        Bundle with the defaults overridden by the language's own entries.

    Raises:
        DuplicateEntryError: If the language defines an entry twice.
    """
    with bind_localization_context(language=language):
        logger.debug("loading_language")
        resources = load_resources_from_folder(root / language)

        check_duplicate_entries(resources, language)

        bundle = create_bundle(language, use_isolating, fallback_language)
        layered = list(defaults) + resources
        for resource in layered:
            bundle.add_resource(resource.resource, allow_overrides=True)

        _compile_messages(bundle, layered)
        logger.debug("loaded_language", catalog_count=len(resources))

    return bundle


def _compile_messages(bundle: FluentBundle, resources: Iterable[Resource]) -> None:
    # Messages are compiled up front; terms compile on first reference while formatting
    for resource in resources:
        for entry in resource.entries():
            if isinstance(entry, ast.Message):
                bundle.get_message(entry.id.name)

"""Runtime localization.

LanguageLocalizer renders entries for one language, falling back to the
default bundle. Accessor methods are added by subclasses, either bound at
runtime (bindings.bind_localizations) or generated as source
(codegen.write_module).
"""

from pathlib import Path
from typing import Any, ClassVar, Iterable, Mapping, Optional, Sequence, Set, Tuple

from fluent.syntax import ast

from localization.configuration import LocalizationSettings, get_settings
from localization.i18n.bundles import LocalizationHolder
from localization.i18n.errors import IncompleteDefaultBundleError, MissingEntryError
from localization.i18n.loader import base_path, get_default_language, load_resources_from_folder
from localization.i18n.models import Resource
from localization.logging import get_module_logger

logger = get_module_logger()


class LanguageLocalizer:
    """Renders localization entries for a single language.

    Attributes:
        EXPECTED_MESSAGES: Messages the accessors of this class render.
        EXPECTED_TERMS: Terms those messages rely on.
        localizations: Holder with the loaded bundles.
        language: Requested language, the default one is used if not loaded.
    """

    EXPECTED_MESSAGES: ClassVar[Tuple[str, ...]] = ()
    EXPECTED_TERMS: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, holder: LocalizationHolder, language: Optional[str] = None):
        self.localizations = holder
        self.language = language

    @classmethod
    def validate_default_bundle_complete(
        cls,
        translations_dir: Optional[Path] = None,
        default_language: Optional[str] = None,
        settings: Optional[LocalizationSettings] = None,
    ) -> None:
        """Check the default language provides every entry this class expects.

        Must be called once at startup, failure is fatal.

        Raises:
            IncompleteDefaultBundleError: Listing every missing key.
        """
        validate_default_bundle_complete(
            cls.EXPECTED_MESSAGES,
            cls.EXPECTED_TERMS,
            translations_dir=translations_dir,
            default_language=default_language,
            settings=settings,
        )

    def localize(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> str:
        """Render an entry.

        Formatting errors are logged and replaced by a generic message
        rather than raised.

        Args:
            name: Message identifier.
            arguments: Variable values keyed by their name in the catalog.

        Returns:
            The rendered text.

        Raises:
            MissingEntryError: If the bundle has no value for the message.
        """
        bundle = self.localizations.get_bundle(self.language)
        try:
            message = bundle.get_message(name)
        except KeyError as e:
            raise MissingEntryError(name, self.language) from e
        if message.value is None:
            raise MissingEntryError(name, self.language)

        text, errors = bundle.format_pattern(message.value, dict(arguments) if arguments else None)

        if not errors:
            return str(text)
        return self.handle_errors(name, errors)

    def handle_errors(self, name: str, errors: Sequence[Exception]) -> str:
        """Log formatting errors and return the text shown instead."""
        logger.error(
            "localization_failed",
            entry=name,
            language=self.language,
            errors=[str(error) for error in errors],
        )
        return f'Failed to localize the "{name}" response.'


def collect_defined_entries(resources: Iterable[Resource]) -> Tuple[Set[str], Set[str]]:
    """Messages with a value and terms defined by a set of catalogs.

    Returns:
        (message names, term names)
    """
    messages: Set[str] = set()
    terms: Set[str] = set()
    for resource in resources:
        for entry in resource.entries():
            if isinstance(entry, ast.Message):
                if entry.value is not None:
                    messages.add(entry.id.name)
            else:
                terms.add(entry.id.name)
    return messages, terms


def validate_default_bundle_complete(
    expected_messages: Iterable[str],
    expected_terms: Iterable[str],
    translations_dir: Optional[Path] = None,
    default_language: Optional[str] = None,
    settings: Optional[LocalizationSettings] = None,
) -> None:
    """Check the default language's own catalogs define every expected entry.

    Other languages may omit entries since they fall back to the defaults;
    the default language provides that floor and may not.

    Args:
        expected_messages: Messages the accessors render.
        expected_terms: Terms defined in the schema catalogs.
        translations_dir: Catalog root, defaults to the configured one.
        default_language: Language to check, defaults to the configured one.
        settings: Optional settings override.

    Raises:
        IncompleteDefaultBundleError: Listing every missing key.
        LocalizationLoadingError: If the default catalogs cannot be loaded.
    """
    settings = settings or get_settings().localization
    root = Path(translations_dir) if translations_dir is not None else base_path(settings)
    language = default_language or get_default_language(settings)
    logger.debug("validating_default_bundle", language=language)

    found_messages, found_terms = collect_defined_entries(
        load_resources_from_folder(root / language)
    )

    missing_messages = [name for name in expected_messages if name not in found_messages]
    missing_terms = [name for name in expected_terms if name not in found_terms]

    if missing_messages or missing_terms:
        raise IncompleteDefaultBundleError(language, missing_messages, missing_terms)

    logger.info("default_bundle_valid", language=language)

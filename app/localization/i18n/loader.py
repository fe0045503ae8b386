"""Catalog loading.

Reads Fluent catalog files from a language directory, reports syntax
errors with line and column, and resolves the configured catalog root and
default language.
"""

from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from babel.core import parse_locale
from fluent.syntax import FluentParser, ast

from localization.configuration import LocalizationSettings, get_settings
from localization.i18n.errors import (
    CatalogParseError,
    DuplicateEntryError,
    LocalizationLoadingError,
)
from localization.i18n.models import FILE_EXTENSION, Resource, entry_key
from localization.logging import bind_localization_context, get_module_logger

logger = get_module_logger()


def base_path(settings: Optional[LocalizationSettings] = None) -> Path:
    """Directory localizations are loaded from.

    Controlled by the TRANSLATION_DIR environment variable, defaults to the
    `localizations` sub-directory of the current working directory.

    Args:
        settings: Optional settings override.

    Returns:
        Catalog root directory.
    """
    settings = settings or get_settings().localization
    return settings.base_path


def parse_language_identifier(value: str) -> Tuple[Optional[str], ...]:
    """Parse a language identifier such as `en_US`, `en-US`, `fr` or `tlh`.

    Only the syntax is checked. Identifiers babel has no locale data for
    are valid, the formatting engine falls back to default plural rules
    for them.

    Args:
        value: Identifier to parse.

    Returns:
        (language, territory, script, variant, ...) as split by babel.

    Raises:
        ValueError: If the identifier is malformed.
    """
    try:
        parts = parse_locale(value.replace("-", "_"))
    except (ValueError, TypeError) as e:
        raise ValueError(f"Invalid language identifier: {value}") from e

    # Language subtags are 2-3 or 5-8 letters
    if len(parts[0]) not in (2, 3, 5, 6, 7, 8):
        raise ValueError(f"Invalid language identifier: {value}")
    return parts


def get_default_language(settings: Optional[LocalizationSettings] = None) -> str:
    """Current default language, controlled by the DEFAULT_LANG environment variable.

    Args:
        settings: Optional settings override.

    Returns:
        The configured identifier, validated.

    Raises:
        LocalizationLoadingError: If the identifier is not a valid language.
    """
    settings = settings or get_settings().localization
    value = settings.DEFAULT_LANG
    try:
        parse_language_identifier(value)
    except ValueError as e:
        raise LocalizationLoadingError(f"Invalid default language: {value}") from e
    return value


def load_resources_from_folder(path: Path) -> List[Resource]:
    """Load all Fluent catalogs in a directory.

    Only files with the .ftl extension are loaded, sub-directories are not
    descended into. Files are loaded in name order.

    Args:
        path: Directory to load the catalogs from.

    Returns:
        Parsed catalogs, one per file.

    Raises:
        LocalizationLoadingError: If the directory or a file cannot be read.
        CatalogParseError: If a file has syntax errors.
    """
    path = Path(path)
    logger.debug("loading_resources", path=str(path))

    try:
        items = sorted(path.iterdir(), key=lambda item: item.name)
    except OSError as e:
        raise LocalizationLoadingError(
            f"Failed to read localization directory {path}"
        ) from e

    parser = FluentParser(with_spans=True)
    loaded: List[Resource] = []

    for item in items:
        if not item.is_file():
            logger.debug("skipping_non_file", path=str(item))
            continue

        if not item.name.endswith(FILE_EXTENSION):
            logger.warning(
                "skipping_wrong_extension",
                path=str(item),
                expected=FILE_EXTENSION,
            )
            continue

        name = item.name[: -len(FILE_EXTENSION)]
        with bind_localization_context(catalog=name):
            loaded.append(_load_resource(parser, item, name))

    return loaded


def _load_resource(parser: FluentParser, item: Path, name: str) -> Resource:
    try:
        source = item.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LocalizationLoadingError(f"Failed to load localization file {item}") from e

    resource = parser.parse(source)
    errors = [
        prettify_parse_error(source, annotation)
        for entry in resource.body
        if isinstance(entry, ast.Junk)
        for annotation in entry.annotations
    ]
    if errors:
        logger.error("localization_file_parse_failed", path=str(item), errors=errors)
        raise CatalogParseError(item, errors)

    logger.debug("loaded_localization_file", path=str(item))
    return Resource(name=name, resource=resource, path=item)


def locate_offset(source: str, offset: int) -> Tuple[int, int, str]:
    """Find the line and column of a character offset.

    Args:
        source: Full file content.
        offset: Character offset reported by the parser.

    Returns:
        (line, column, line text), line and column starting at 1.
    """
    position = 0
    line_number = 0
    text = ""
    for line_number, line in enumerate(source.splitlines(keepends=True), start=1):
        text = line.rstrip("\r\n")
        if position + len(line) > offset:
            return line_number, offset - position + 1, text
        position += len(line)

    if line_number == 0:
        return 1, 1, ""
    # Errors at end of file point just past the last character
    return line_number, len(text) + 1, text


def prettify_parse_error(source: str, annotation: ast.Annotation) -> str:
    """Format a parser annotation with the line it points at.

    Args:
        source: Full file content.
        annotation: Annotation attached to a Junk entry.

    Returns:
        `<code>: <message> at <line>:<column>` followed by the source line.
    """
    offset = annotation.span.start if annotation.span is not None else 0
    line, column, text = locate_offset(source, offset)
    return f"{annotation.code}: {annotation.message} at {line}:{column}\n    {text}"


def check_duplicate_entries(resources: Iterable[Resource], language: str) -> None:
    """Verify no entry is defined twice among one language's own catalogs.

    Bundles are assembled with override semantics, which would silently
    mask such duplicates.

    Args:
        resources: Catalogs of a single language, without inherited defaults.
        language: Language (or tier) name used in the error.

    Raises:
        DuplicateEntryError: Listing every duplicated key.
    """
    seen: Dict[str, str] = {}
    duplicates: Dict[str, List[str]] = defaultdict(list)

    for resource in resources:
        for entry in resource.entries():
            key = entry_key(entry.id.name, isinstance(entry, ast.Term))
            if key in seen:
                duplicates[key].append(resource.name)
            else:
                seen[key] = resource.name

    if duplicates:
        raise DuplicateEntryError(
            language,
            [
                (key, seen[key], catalog)
                for key, catalogs in duplicates.items()
                for catalog in catalogs
            ],
        )

"""Custom exceptions for the localization system.

Everything found while compiling catalogs or assembling bundles is an
authoring defect and aborts startup. Formatting problems hit while
rendering a single entry are not raised; see LanguageLocalizer.localize.
"""

from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple


class LocalizationError(Exception):
    """Base exception for all localization errors.

    Example:
        try:
            holder = LocalizationHolder.load()
        except LocalizationError as e:
            logger.error("localization_error", error=str(e))
    """

    pass


class LocalizationLoadingError(LocalizationError):
    """Raised when catalogs cannot be read or the configuration is invalid.

    Example:
        >>> load_resources_from_folder(Path("missing"))
        Traceback (most recent call last):
        ...
        LocalizationLoadingError: Failed to read localization directory missing
    """

    pass


class CatalogParseError(LocalizationLoadingError):
    """Raised when a catalog file contains syntax errors.

    Attributes:
        path: File that failed to parse.
        errors: One formatted message per syntax error, with line and column.
    """

    def __init__(self, path: Path, errors: Sequence[str]):
        self.path = path
        self.errors = tuple(errors)
        details = "\n-----\n".join(self.errors)
        super().__init__(f"Failed to load localization file {path}:\n{details}")


class DuplicateEntryError(LocalizationLoadingError):
    """Raised when one language defines the same entry more than once.

    Attributes:
        language: Language (or schema tier) the duplicates were found in.
        duplicates: (entry key, first catalog, second catalog) triples.
    """

    def __init__(self, language: str, duplicates: Iterable[Tuple[str, str, str]]):
        self.language = language
        self.duplicates = tuple(duplicates)
        details = ", ".join(
            f"{key} (in {first} and {second})" for key, first, second in self.duplicates
        )
        super().__init__(f"Duplicate localization keys for {language}: {details}")


class GraphError(LocalizationError):
    """Base exception for failures while resolving the entry graph."""

    pass


class UnknownEntryError(GraphError):
    """Raised when an entry references another entry that was never loaded."""

    def __init__(self, entry: str, referenced_by: Sequence[str]):
        self.entry = entry
        self.referenced_by = tuple(referenced_by)
        super().__init__(
            f"Encountered a dependency on localization entry {entry} "
            f"(referenced by {', '.join(self.referenced_by)}) but no such entry was loaded"
        )


class UnsupportedExpressionError(GraphError):
    """Raised when a template uses a construct the bindings cannot handle.

    Function references (`{ NUMBER($count) }`) are not supported.
    """

    def __init__(self, category: str, entry: str, expression: str):
        self.category = category
        self.entry = entry
        self.expression = expression
        super().__init__(
            f"Unsupported expression {expression} in localization entry {entry} ({category})"
        )


class CyclicReferenceError(GraphError):
    """Raised when entries reference each other in a loop."""

    def __init__(self, entry: str):
        self.entry = entry
        super().__init__(f"Cyclic localization loop detected at entry {entry}!")


class TooManyVariablesError(GraphError):
    """Raised when an entry needs more variables than there are type parameters."""

    def __init__(self, entry: str, count: int, limit: int):
        self.entry = entry
        self.count = count
        self.limit = limit
        super().__init__(
            f"Localization entry {entry} needs {count} variables, "
            f"at most {limit} are supported"
        )


class AccessorNameError(GraphError):
    """Raised when an entry cannot be turned into a usable accessor name."""

    pass


class IncompleteDefaultBundleError(LocalizationError):
    """Raised when the default language lacks entries the accessors expect.

    Attributes:
        language: The default language that was checked.
        missing_messages: Message names without a value in the default catalogs.
        missing_terms: Term names missing from the default catalogs.
    """

    def __init__(
        self,
        language: str,
        missing_messages: Sequence[str],
        missing_terms: Sequence[str],
    ):
        self.language = language
        self.missing_messages = list(missing_messages)
        self.missing_terms = list(missing_terms)
        keys = self.missing_messages + [f"-{name}" for name in self.missing_terms]
        super().__init__(
            f"The following localization keys were not found in the default "
            f"language bundle ({language}): {', '.join(keys)}"
        )


class MissingEntryError(LocalizationError):
    """Raised when a bundle lacks an entry its accessor was generated for.

    Accessors are generated from the same entries the completeness check
    verifies, so this indicates the startup validation was skipped.
    """

    def __init__(self, entry: str, language: Optional[str] = None):
        self.entry = entry
        self.language = language
        super().__init__(
            f"Localization entry {entry} has no value in the bundle for {language}"
        )

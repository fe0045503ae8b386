"""i18n system - Fluent catalog compilation and runtime localization.

Main components:
- models: Resource, Node, catalog constants
- loader: catalog loading and parse error reporting
- graph / resolver: entry graph and transitive variable resolution
- accessors / bindings / codegen: accessor surface, bound or generated
- bundles: per-language bundles with default-language fallback
- localizer: LanguageLocalizer and the default bundle completeness check
- factory: startup entry points
"""

from localization.i18n.accessors import Accessor, Parameter, build_accessors, sanitize
from localization.i18n.bindings import (
    CompiledLocalizations,
    bind_localizations,
    compile_localizations,
)
from localization.i18n.bundles import LocalizationHolder, load_bundle
from localization.i18n.errors import (
    AccessorNameError,
    CatalogParseError,
    CyclicReferenceError,
    DuplicateEntryError,
    GraphError,
    IncompleteDefaultBundleError,
    LocalizationError,
    LocalizationLoadingError,
    MissingEntryError,
    TooManyVariablesError,
    UnknownEntryError,
    UnsupportedExpressionError,
)
from localization.i18n.factory import bootstrap_localizations, create_localization_holder
from localization.i18n.graph import build_graph
from localization.i18n.loader import load_resources_from_folder
from localization.i18n.localizer import LanguageLocalizer, validate_default_bundle_complete
from localization.i18n.models import DEFAULT_DIR, FILE_EXTENSION, Node, Resource
from localization.i18n.resolver import resolve_dependencies

__all__ = [
    "Accessor",
    "AccessorNameError",
    "CatalogParseError",
    "CompiledLocalizations",
    "CyclicReferenceError",
    "DEFAULT_DIR",
    "DuplicateEntryError",
    "FILE_EXTENSION",
    "GraphError",
    "IncompleteDefaultBundleError",
    "LanguageLocalizer",
    "LocalizationError",
    "LocalizationHolder",
    "LocalizationLoadingError",
    "MissingEntryError",
    "Node",
    "Parameter",
    "Resource",
    "TooManyVariablesError",
    "UnknownEntryError",
    "UnsupportedExpressionError",
    "bind_localizations",
    "bootstrap_localizations",
    "build_accessors",
    "build_graph",
    "compile_localizations",
    "create_localization_holder",
    "load_bundle",
    "load_resources_from_folder",
    "resolve_dependencies",
    "sanitize",
    "validate_default_bundle_complete",
]

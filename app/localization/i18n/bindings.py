"""Accessor binding.

Compiles the `default` schema catalogs (load, build graph, resolve,
describe accessors) and turns the result into a LanguageLocalizer
subclass carrying one method per message.

Usage:
    from localization.i18n import LocalizationHolder, bind_localizations

    Localizer = bind_localizations()
    Localizer.validate_default_bundle_complete()

    localizer = Localizer(LocalizationHolder.load(), "fr")
    localizer.messages_welcome_user(name="Ada")
"""

import inspect
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple, Type

from localization.configuration import LocalizationSettings
from localization.i18n.accessors import Accessor, build_accessors, expected_entries
from localization.i18n.graph import build_graph
from localization.i18n.loader import base_path, check_duplicate_entries, load_resources_from_folder
from localization.i18n.localizer import LanguageLocalizer
from localization.i18n.models import DEFAULT_DIR, FluentArgument, Node
from localization.i18n.resolver import resolve_dependencies
from localization.logging import get_module_logger

logger = get_module_logger()


@dataclass(frozen=True)
class CompiledLocalizations:
    """Result of compiling the schema catalogs.

    Attributes:
        graph: Resolved entry graph.
        accessors: One accessor per message, sorted by method name.
        expected_messages: Message names the default language must define.
        expected_terms: Term names the default language must define.
    """

    graph: Dict[str, Node]
    accessors: Tuple[Accessor, ...]
    expected_messages: Tuple[str, ...]
    expected_terms: Tuple[str, ...]


def compile_localizations(
    translations_dir: Optional[Path] = None,
    settings: Optional[LocalizationSettings] = None,
) -> CompiledLocalizations:
    """Load and resolve the `default` catalogs.

    Args:
        translations_dir: Catalog root, defaults to the configured one.
        settings: Optional settings override.

    Returns:
        CompiledLocalizations for the schema catalogs.

    Raises:
        LocalizationError: For any load or graph error, all of them fatal.
    """
    root = Path(translations_dir) if translations_dir is not None else base_path(settings)
    resources = load_resources_from_folder(root / DEFAULT_DIR)
    check_duplicate_entries(resources, DEFAULT_DIR)

    graph = resolve_dependencies(build_graph(resources))
    accessors = tuple(build_accessors(graph, reserved=dir(LanguageLocalizer)))
    expected_messages, expected_terms = expected_entries(graph.values())

    logger.info(
        "compiled_localizations",
        path=str(root / DEFAULT_DIR),
        accessor_count=len(accessors),
        term_count=len(expected_terms),
    )
    return CompiledLocalizations(
        graph=graph,
        accessors=accessors,
        expected_messages=expected_messages,
        expected_terms=expected_terms,
    )


def make_accessor(accessor: Accessor) -> Callable[..., str]:
    """Build the method rendering one accessor's entry.

    The method's signature lists the accessor parameters, so calling it
    with missing or unexpected arguments raises TypeError.
    """
    entry = accessor.entry

    if not accessor.parameters:

        def method(self: LanguageLocalizer) -> str:
            return self.localize(entry)

    else:
        signature = inspect.Signature(
            [inspect.Parameter("self", inspect.Parameter.POSITIONAL_OR_KEYWORD)]
            + [
                inspect.Parameter(
                    parameter.name,
                    inspect.Parameter.POSITIONAL_OR_KEYWORD,
                    annotation=FluentArgument,
                )
                for parameter in accessor.parameters
            ],
            return_annotation=str,
        )
        variables = {parameter.name: parameter.variable for parameter in accessor.parameters}

        def method(*args, **kwargs) -> str:
            bound = signature.bind(*args, **kwargs)
            self = bound.arguments.pop("self")
            return self.localize(
                entry,
                {variables[name]: value for name, value in bound.arguments.items()},
            )

        method.__signature__ = signature  # type: ignore[attr-defined]

    method.__name__ = accessor.method_name
    method.__qualname__ = accessor.method_name
    method.__doc__ = f"Localize `{entry}` from the {accessor.category} catalog."
    return method


def bind_localizations(
    translations_dir: Optional[Path] = None,
    class_name: str = "Localizer",
    settings: Optional[LocalizationSettings] = None,
) -> Type[LanguageLocalizer]:
    """Create a LanguageLocalizer subclass with one method per message.

    Args:
        translations_dir: Catalog root, defaults to the configured one.
        class_name: Name of the created class.
        settings: Optional settings override.

    Returns:
        The subclass, with EXPECTED_MESSAGES and EXPECTED_TERMS filled in.
    """
    compiled = compile_localizations(translations_dir, settings=settings)
    namespace: Dict[str, object] = {
        "EXPECTED_MESSAGES": compiled.expected_messages,
        "EXPECTED_TERMS": compiled.expected_terms,
        "__module__": __name__,
    }
    for accessor in compiled.accessors:
        namespace[accessor.method_name] = make_accessor(accessor)

    return type(class_name, (LanguageLocalizer,), namespace)

"""Test data factories for the i18n system.

Provides deterministic builders for:
- Resource (parsed catalogs)
- Node and resolved graphs
- On-disk catalog trees
"""

from pathlib import Path
from typing import Dict, Iterable, Optional

from fluent.syntax import FluentParser

from localization.i18n.models import Node, Resource, entry_key


def make_resource(source: str, name: str = "messages") -> Resource:
    """Parse FTL source into a Resource.

    Args:
        source: FTL text.
        name: Catalog name.

    Returns:
        Resource instance.
    """
    return Resource(name=name, resource=FluentParser(with_spans=True).parse(source))


def make_node(
    name: str,
    variables: Iterable[str] = (),
    dependencies: Iterable[str] = (),
    term: bool = False,
    category: str = "messages",
) -> Node:
    """Create a Node instance.

    Args:
        name: Entry name without term prefix.
        variables: Directly used variables.
        dependencies: Keys of referenced entries (terms prefixed with `-`).
        term: Whether the node is a term.
        category: Catalog name.

    Returns:
        Node instance.
    """
    return Node(
        category=category,
        name=name,
        term=term,
        variables=set(variables),
        dependencies=set(dependencies),
    )


def make_graph(*nodes: Node) -> Dict[str, Node]:
    """Key nodes the way build_graph does."""
    return {entry_key(node.name, node.term): node for node in nodes}


def write_catalogs(
    root: Path,
    catalogs: Dict[str, Dict[str, str]],
    extension: Optional[str] = ".ftl",
) -> Path:
    """Write a catalog tree.

    Args:
        root: Catalog root directory.
        catalogs: {directory: {catalog name: FTL source}}.
        extension: File extension appended to every catalog name.

    Returns:
        The root directory.
    """
    for directory, files in catalogs.items():
        language_dir = root / directory
        language_dir.mkdir(parents=True, exist_ok=True)
        for name, source in files.items():
            (language_dir / f"{name}{extension or ''}").write_text(source, encoding="utf-8")
    return root


DEFAULT_MESSAGES = """\
-brand = Acme
greeting = Hello
welcome-user = Hello, { $name }!
about = About { -brand }
inbox = { $count ->
        [one] One message for { $name }
       *[other] { $count } messages for { $name }
    }
"""

FRENCH_MESSAGES = """\
greeting = Bonjour
welcome-user = Bonjour, { $name } !
"""

GERMAN_MESSAGES = """\
about = Über { -brand }
"""


def make_localization_tree(root: Path) -> Path:
    """Write the standard catalog tree used across the i18n tests.

    - default/messages.ftl and en_US/messages.ftl: full schema
    - fr/messages.ftl: overrides greeting and welcome-user
    - de/messages.ftl: overrides about only
    - README.md: a stray file at the root
    """
    write_catalogs(
        root,
        {
            "default": {"messages": DEFAULT_MESSAGES},
            "en_US": {"messages": DEFAULT_MESSAGES},
            "fr": {"messages": FRENCH_MESSAGES},
            "de": {"messages": GERMAN_MESSAGES},
        },
    )
    (root / "README.md").write_text("catalogs", encoding="utf-8")
    return root

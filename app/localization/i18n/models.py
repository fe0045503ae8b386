"""Core data structures for the localization system.

Resources are parsed catalogs, nodes are their build-time graph
representation.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import Iterator, Optional, Set, Union

from fluent.runtime.types import FluentType
from fluent.syntax import ast

FILE_EXTENSION = ".ftl"
DEFAULT_DIR = "default"
TERM_PREFIX = "-"

# Values the formatting engine converts to its own runtime types
FluentArgument = Union[str, int, float, Decimal, date, datetime, FluentType]


def entry_key(name: str, term: bool) -> str:
    """Graph key of an entry.

    Messages and terms live in separate namespaces, terms are keyed with
    the `-` they are written with.

    Args:
        name: Entry identifier without prefix.
        term: Whether the entry is a term.

    Returns:
        Key unique across both namespaces.
    """
    return f"{TERM_PREFIX}{name}" if term else name


@dataclass(frozen=True)
class Resource:
    """A parsed catalog and the file name it came from.

    Attributes:
        name: File name without extension, used as the accessor category.
        resource: Parsed Fluent AST.
        path: File the catalog was read from, if any.
    """

    name: str
    resource: ast.Resource
    path: Optional[Path] = None

    def entries(self) -> Iterator[Union[ast.Message, ast.Term]]:
        """Iterate over the messages and terms, skipping comments."""
        for entry in self.resource.body:
            if isinstance(entry, (ast.Message, ast.Term)):
                yield entry


@dataclass
class Node:
    """Build-time view of one entry.

    Mutated in place while dependencies are resolved, read-only afterwards.

    Attributes:
        category: Catalog the entry was defined in.
        name: Entry identifier.
        term: True for terms, which never get an accessor.
        variables: Variables needed, directly or through references.
        dependencies: Keys of entries still to be folded into this node.
    """

    category: str
    name: str
    term: bool = False
    variables: Set[str] = field(default_factory=set)
    dependencies: Set[str] = field(default_factory=set)

    @property
    def key(self) -> str:
        """Graph key of this node."""
        return entry_key(self.name, self.term)

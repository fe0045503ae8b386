"""Accessor generation.

Derives one accessor description per resolved message: its method name,
the entry it renders and one parameter per variable it needs. Terms are
private building blocks and never get an accessor.
"""

import keyword
import string
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from localization.i18n.errors import AccessorNameError, GraphError, TooManyVariablesError
from localization.i18n.models import Node

# Placeholder type symbols handed out to parameters in order
TYPE_PARAMETER_ALPHABET: Tuple[str, ...] = tuple(string.ascii_uppercase)
MAX_VARIABLES = len(TYPE_PARAMETER_ALPHABET)


def sanitize(name: str) -> str:
    """Turn a catalog, entry or variable name into identifier form."""
    return name.replace("-", "_").lower()


def get_type_parameters(amount: int, entry: str = "") -> Tuple[str, ...]:
    """First `amount` type parameter names.

    Raises:
        TooManyVariablesError: If more names are needed than the alphabet has.
    """
    if amount > MAX_VARIABLES:
        raise TooManyVariablesError(entry, amount, MAX_VARIABLES)
    return TYPE_PARAMETER_ALPHABET[:amount]


@dataclass(frozen=True)
class Parameter:
    """One accessor argument.

    Attributes:
        name: Python parameter name.
        variable: Variable name passed to the formatting engine.
        type_parameter: Placeholder type symbol used in generated code.
    """

    name: str
    variable: str
    type_parameter: str


@dataclass(frozen=True)
class Accessor:
    """Description of one generated localization method.

    Attributes:
        method_name: `<category>_<name>`, sanitized.
        entry: Message identifier rendered by the accessor.
        category: Catalog the message was defined in.
        parameters: Parameters in variable name order.
    """

    method_name: str
    entry: str
    category: str
    parameters: Tuple[Parameter, ...] = ()

    @property
    def variables(self) -> Tuple[str, ...]:
        """Catalog variable names, in parameter order."""
        return tuple(parameter.variable for parameter in self.parameters)


def _parameter_name(variable: str) -> str:
    name = sanitize(variable)
    if keyword.iskeyword(name) or name == "self":
        name = f"{name}_"
    return name


def build_accessor(node: Node) -> Accessor:
    """Describe the accessor of one resolved message node.

    Raises:
        GraphError: If the node still has pending dependencies.
        TooManyVariablesError: If the message needs too many variables.
        AccessorNameError: If the name is not a valid identifier or two
            variables map to the same parameter name.
    """
    if node.dependencies:
        raise GraphError(
            f"Localization entry {node.key} still has unresolved dependencies: "
            f"{', '.join(sorted(node.dependencies))}"
        )

    method_name = f"{sanitize(node.category)}_{sanitize(node.name)}"
    if not method_name.isidentifier() or keyword.iskeyword(method_name):
        raise AccessorNameError(
            f"Localization entry {node.name} in {node.category} yields invalid "
            f"accessor name {method_name!r}"
        )

    variables = sorted(node.variables)
    letters = get_type_parameters(len(variables), node.name)
    parameters = tuple(
        Parameter(name=_parameter_name(variable), variable=variable, type_parameter=letter)
        for variable, letter in zip(variables, letters)
    )

    names = [parameter.name for parameter in parameters]
    if len(set(names)) != len(names):
        raise AccessorNameError(
            f"Variables of localization entry {node.name} collide after sanitizing: "
            f"{', '.join(variables)}"
        )

    return Accessor(
        method_name=method_name,
        entry=node.name,
        category=node.category,
        parameters=parameters,
    )


def build_accessors(
    graph: Dict[str, Node],
    reserved: Iterable[str] = (),
) -> List[Accessor]:
    """Describe the accessors of every message in a resolved graph.

    Args:
        graph: Resolved mapping of entry key to node.
        reserved: Names already taken on the class the accessors go on.

    Returns:
        Accessors sorted by method name.

    Raises:
        AccessorNameError: If two messages map to the same method name, or
            a method name is reserved.
    """
    taken = set(reserved)
    accessors: Dict[str, Accessor] = {}
    for node in graph.values():
        if node.term:
            continue
        accessor = build_accessor(node)
        if accessor.method_name in taken:
            raise AccessorNameError(
                f"Localization entry {accessor.entry} maps to reserved name "
                f"{accessor.method_name}"
            )
        existing = accessors.get(accessor.method_name)
        if existing is not None:
            raise AccessorNameError(
                f"Localization entries {existing.entry} and {accessor.entry} both map "
                f"to accessor {accessor.method_name}"
            )
        accessors[accessor.method_name] = accessor

    return [accessors[name] for name in sorted(accessors)]


def expected_entries(nodes: Iterable[Node]) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """Names the default language has to provide.

    Returns:
        (message names, term names), each sorted.
    """
    messages = sorted(node.name for node in nodes if not node.term)
    terms = sorted(node.name for node in nodes if node.term)
    return tuple(messages), tuple(terms)

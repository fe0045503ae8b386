"""Entry graph construction.

Walks every parsed catalog and records, per message and term, the
variables it uses and the entries it references directly.
"""

from typing import Dict, Iterable, List

from fluent.syntax import ast

from localization.i18n.errors import UnsupportedExpressionError
from localization.i18n.models import Node, Resource, entry_key
from localization.logging import get_module_logger

logger = get_module_logger()


def build_graph(resources: Iterable[Resource]) -> Dict[str, Node]:
    """Collect the nodes of all catalogs in a single mapping.

    Duplicate entries are rejected while loading, so keys do not collide.

    Args:
        resources: Catalogs of one tier (normally the `default` directory).

    Returns:
        Mapping of entry key to its unresolved node.
    """
    graph: Dict[str, Node] = {}
    for resource in resources:
        for node in generate_nodes_for(resource.name, resource.resource):
            graph[node.key] = node

    logger.debug("built_localization_graph", node_count=len(graph))
    return graph


def generate_nodes_for(category: str, resource: ast.Resource) -> List[Node]:
    """Create one node per message or term of a catalog.

    Messages without a value (attribute-only messages) get no node.

    Args:
        category: Catalog name the entries belong to.
        resource: Parsed catalog.

    Returns:
        Nodes in catalog order.
    """
    out = []

    for entry in resource.body:
        if isinstance(entry, ast.Message):
            if entry.value is None:
                continue
            node = Node(category=category, name=entry.id.name, term=False)
        elif isinstance(entry, ast.Term):
            node = Node(category=category, name=entry.id.name, term=True)
        else:
            continue

        process_pattern(entry.value, node)
        out.append(node)

    return out


def process_pattern(pattern: ast.Pattern, node: Node) -> None:
    """Scan the placeables of a pattern, literal text is ignored."""
    for element in pattern.elements:
        if isinstance(element, ast.Placeable):
            process_expression(element.expression, node)


def process_expression(expression: ast.Expression, node: Node) -> None:
    """Record what an expression needs.

    Select expressions contribute their selector and every variant.

    Raises:
        UnsupportedExpressionError: For function references.
    """
    if isinstance(expression, ast.SelectExpression):
        process_expression(expression.selector, node)
        for variant in expression.variants:
            process_pattern(variant.value, node)
    elif isinstance(expression, ast.VariableReference):
        node.variables.add(expression.id.name)
    elif isinstance(expression, ast.MessageReference):
        node.dependencies.add(entry_key(expression.id.name, term=False))
    elif isinstance(expression, ast.TermReference):
        node.dependencies.add(entry_key(expression.id.name, term=True))
        if expression.arguments is not None:
            process_call_arguments(expression.arguments, node)
    elif isinstance(expression, ast.FunctionReference):
        raise UnsupportedExpressionError(
            node.category, node.key, f"{expression.id.name}()"
        )
    elif isinstance(expression, ast.Placeable):
        process_expression(expression.expression, node)
    elif isinstance(expression, ast.Literal):
        pass
    else:
        raise UnsupportedExpressionError(
            node.category, node.key, type(expression).__name__
        )


def process_call_arguments(arguments: ast.CallArguments, node: Node) -> None:
    """Scan the arguments passed to a parameterized term."""
    for positional in arguments.positional:
        process_expression(positional, node)
    for named in arguments.named:
        process_expression(named.value, node)

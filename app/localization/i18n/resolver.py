"""Transitive dependency resolution.

Folds every referenced entry into the nodes referencing it until no node
has a pending dependency, so each node ends up carrying the full set of
variables it needs. The template language does not check references at
parse time, which makes this the place where unknown and cyclic
references are caught.
"""

from typing import Callable, Dict, List, Optional, Sequence, Tuple

from localization.i18n.errors import CyclicReferenceError, UnknownEntryError
from localization.i18n.models import Node
from localization.logging import get_module_logger

logger = get_module_logger()

# Picks the (node key, dependency key) pair to process next
DependencySelector = Callable[[Sequence[Tuple[str, str]]], Tuple[str, str]]


def _first_pending(candidates: Sequence[Tuple[str, str]]) -> Tuple[str, str]:
    return candidates[0]


def pending_dependencies(graph: Dict[str, Node]) -> List[Tuple[str, str]]:
    """All unresolved edges of the graph, sorted."""
    return sorted(
        (key, dependency)
        for key, node in graph.items()
        for dependency in node.dependencies
    )


def resolve_dependencies(
    graph: Dict[str, Node],
    selector: Optional[DependencySelector] = None,
) -> Dict[str, Node]:
    """Resolve the graph in place to a fixed point.

    The result does not depend on which pending dependency is processed
    first; `selector` allows choosing it, by default the first in sorted
    order is taken.

    Args:
        graph: Mapping of entry key to node, as produced by build_graph.
        selector: Optional chooser for the next edge to process.

    Returns:
        The same mapping, with every node's dependencies emptied.

    Raises:
        UnknownEntryError: If an entry references one that was not loaded.
        CyclicReferenceError: If references form a loop.
    """
    selector = selector or _first_pending
    rounds = 0

    while True:
        candidates = pending_dependencies(graph)
        if not candidates:
            break

        _, todo = selector(candidates)
        target = graph.get(todo)
        if target is None:
            raise UnknownEntryError(
                todo, sorted({key for key, dependency in candidates if dependency == todo})
            )

        variables = set(target.variables)
        dependencies = set(target.dependencies)

        for key, node in graph.items():
            if todo not in node.dependencies:
                continue
            if key == todo:
                raise CyclicReferenceError(key)

            node.dependencies.discard(todo)
            node.variables.update(variables)
            node.dependencies.update(dependencies)

        rounds += 1

    logger.debug("resolved_localization_graph", node_count=len(graph), rounds=rounds)
    return graph

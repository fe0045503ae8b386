"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_graph,
    make_localization_tree,
    make_node,
    make_resource,
    write_catalogs,
)

__all__ = [
    "make_graph",
    "make_localization_tree",
    "make_node",
    "make_resource",
    "write_catalogs",
]

"""Core abstractions for nodeit.

This package contains the node model, the lazy iterator, the predicate
algebra and the terminal aggregates. It has no dependencies outside the
standard library and never imports from the adapters.
"""

from .node import Node, NodeKind, CONTAINER_KINDS, iter_pairs
from .iterator import NodeIterator, from_node, from_nodes, from_iterators
from .predicates import (
    Predicate,
    ALL,
    NONE,
    all_nodes,
    no_nodes,
    with_kind,
    with_value,
    with_string_value,
    with_short_tag,
    with_prefix,
    with_suffix,
    with_map_key,
    with_map_value,
    with_map_key_value,
    negate,
    union,
    intersect,
    string_value,
)
from .aggregates import any_match, all_match, to_list, count, first

__all__ = [
    # Node model
    "Node",
    "NodeKind",
    "CONTAINER_KINDS",
    "iter_pairs",
    # Iterators
    "NodeIterator",
    "from_node",
    "from_nodes",
    "from_iterators",
    # Predicates
    "Predicate",
    "ALL",
    "NONE",
    "all_nodes",
    "no_nodes",
    "with_kind",
    "with_value",
    "with_string_value",
    "with_short_tag",
    "with_prefix",
    "with_suffix",
    "with_map_key",
    "with_map_value",
    "with_map_key_value",
    "negate",
    "union",
    "intersect",
    "string_value",
    # Aggregates
    "any_match",
    "all_match",
    "to_list",
    "count",
    "first",
]

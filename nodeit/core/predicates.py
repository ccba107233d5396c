"""Predicate library for nodeit.

Predicates are plain callables taking a node and returning a bool. The
constructors below close over comparison data (a kind, a value, a tag)
and never mutate the node they test. Combinators build new predicates
out of existing ones, so arbitrary boolean expressions over nodes can be
assembled without writing lambdas.

Example:
    >>> is_named_service = intersect(
    ...     with_kind(NodeKind.MAPPING),
    ...     with_map_key_value(with_value("kind"), with_value("Service")),
    ... )
"""

from typing import Callable

from .node import NodeKind, iter_pairs

Predicate = Callable[[object], bool]


def all_nodes(node) -> bool:
    """Match every node."""
    return True


def no_nodes(node) -> bool:
    """Match no node."""
    return False


# Short aliases that don't shadow the all()/None builtins
ALL = all_nodes
NONE = no_nodes


def with_kind(kind: NodeKind) -> Predicate:
    """Match nodes of the given kind."""
    def predicate(node) -> bool:
        return node.kind == kind
    return predicate


def with_value(value: str) -> Predicate:
    """Match nodes whose value is exactly ``value``."""
    def predicate(node) -> bool:
        return node.value == value
    return predicate


def with_string_value(value: str) -> Predicate:
    """Match nodes whose scalar value is exactly ``value``."""
    return with_value(value)


def with_short_tag(tag: str) -> Predicate:
    """Match nodes whose short tag is exactly ``tag`` (e.g. ``!!int``)."""
    def predicate(node) -> bool:
        return node.tag == tag
    return predicate


def with_prefix(prefix: str) -> Predicate:
    """Match nodes whose value starts with ``prefix``."""
    def predicate(node) -> bool:
        return node.value.startswith(prefix)
    return predicate


def with_suffix(suffix: str) -> Predicate:
    """Match nodes whose value ends with ``suffix``."""
    def predicate(node) -> bool:
        return node.value.endswith(suffix)
    return predicate


def with_map_key(key: str) -> Predicate:
    """Match mapping nodes that have a key equal to ``key``.

    Returns False for any node that isn't a mapping.
    """
    return with_map_key_value(with_value(key), all_nodes)


def with_map_value(value: str) -> Predicate:
    """Match mapping nodes that have a value equal to ``value``."""
    return with_map_key_value(all_nodes, with_value(value))


def with_map_key_value(key_predicate: Predicate, value_predicate: Predicate) -> Predicate:
    """Match mapping nodes with a pair satisfying both predicates.

    Both predicates must hold for the same (key, value) pair; a matching
    key in one pair and a matching value in another is not a match.
    """
    def predicate(node) -> bool:
        for key, value in iter_pairs(node):
            if key_predicate(key) and value_predicate(value):
                return True
        return False
    return predicate


def negate(predicate: Predicate) -> Predicate:
    """Invert a predicate."""
    def negated(node) -> bool:
        return not predicate(node)
    return negated


def union(*predicates: Predicate) -> Predicate:
    """Match when at least one predicate matches (logical OR).

    Evaluation stops at the first match. An empty union matches nothing.
    """
    def predicate(node) -> bool:
        for p in predicates:
            if p(node):
                return True
        return False
    return predicate


def intersect(*predicates: Predicate) -> Predicate:
    """Match when every predicate matches (logical AND).

    Evaluation stops at the first failure. An empty intersection matches
    everything.
    """
    def predicate(node) -> bool:
        for p in predicates:
            if not p(node):
                return False
        return True
    return predicate


# Scalars tagged as plain strings. Tags are compared as stored, so nodes
# must carry resolved short tags (as load_document produces); an untagged
# scalar does not match.
string_value = intersect(with_kind(NodeKind.SCALAR), with_short_tag("!!str"))

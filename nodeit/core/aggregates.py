"""Terminal aggregate operations for nodeit.

Aggregates drive an iterator to produce a final result. ``any_match``,
``all_match`` and ``first`` stop pulling as soon as the answer is known;
``to_list`` and ``count`` drain the iterator completely.
"""

from typing import Any, Iterable, List, Optional

from .predicates import Predicate


def any_match(nodes: Iterable, predicate: Predicate) -> bool:
    """Return True as soon as a node satisfies ``predicate``.

    Remaining nodes are left unpulled when a match is found.
    """
    for node in nodes:
        if predicate(node):
            return True
    return False


def all_match(nodes: Iterable, predicate: Predicate) -> bool:
    """Return False as soon as a node fails ``predicate``.

    An iterator that yields nothing is vacuously all-matching.
    """
    for node in nodes:
        if not predicate(node):
            return False
    return True


def to_list(nodes: Iterable) -> List[Any]:
    """Pull every remaining node into a list, preserving pull order."""
    return [node for node in nodes]


def count(nodes: Iterable) -> int:
    """Drain ``nodes`` and return how many were pulled."""
    total = 0
    for _ in nodes:
        total += 1
    return total


def first(nodes: Iterable, default: Optional[Any] = None) -> Any:
    """Pull a single node, or return ``default`` when there is none."""
    for node in nodes:
        return node
    return default

"""Lazy node iterators for nodeit.

A NodeIterator is a single-use, pull-based sequence of node references.
Every navigation or filtering method wraps the current iterator in a new
one and returns it, so pipelines read left to right:

    >>> keys = (from_node(doc)
    ...         .recurse_nodes()
    ...         .filter(with_kind(NodeKind.MAPPING))
    ...         .map_keys()
    ...         .to_list())

Nothing is evaluated until a terminal operation (or a plain ``for`` loop)
starts pulling. Subtrees that are never pulled are never visited.
"""

from itertools import chain
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from .node import CONTAINER_KINDS, iter_pairs
from .predicates import Predicate
from . import aggregates

_EXHAUSTED = object()


class NodeIterator:
    """Lazy, chainable iterator over document nodes.

    Exhaustion is permanent: once the iterator has raised StopIteration it
    keeps doing so, even if the wrapped source would produce more items
    later. Pulling advances shared state, so an instance must only be
    consumed by one reader.
    """

    __slots__ = ("_source",)

    def __init__(self, source: Iterable = ()):
        """Wrap any iterable of nodes.

        Args:
            source: Iterable producing node references
        """
        self._source: Optional[Iterator] = iter(source)

    def __iter__(self) -> "NodeIterator":
        return self

    def __next__(self):
        if self._source is None:
            raise StopIteration
        node = next(self._source, _EXHAUSTED)
        if node is _EXHAUSTED:
            # Drop the source so exhaustion sticks
            self._source = None
            raise StopIteration
        return node

    # === Navigation ===

    def recurse_nodes(self, max_depth: Optional[int] = None) -> "NodeIterator":
        """Walk every pulled node and its descendants depth-first, pre-order.

        Document, sequence and mapping nodes are descended into in
        ``children`` order; mapping keys and values are both visited.

        Args:
            max_depth: Deepest level to visit, counting pulled nodes as
                depth 0. None means unlimited.

        Raises:
            ValueError: If max_depth is negative
        """
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        return NodeIterator(_walk(self, max_depth))

    def values(self) -> "NodeIterator":
        """Descend one level, yielding the children of every pulled node."""
        return NodeIterator(_children(self))

    def map_keys(self) -> "NodeIterator":
        """Yield the keys of every pulled mapping node."""
        return NodeIterator(key for key, _ in _pairs(self))

    def map_values(self) -> "NodeIterator":
        """Yield the values of every pulled mapping node."""
        return NodeIterator(value for _, value in _pairs(self))

    def values_for_map(self,
                       key_predicate: Predicate,
                       value_predicate: Predicate) -> "NodeIterator":
        """Yield mapping values whose pair satisfies both predicates.

        Both predicates are evaluated against the same (key, value) pair.
        """
        return NodeIterator(
            value for key, value in _pairs(self)
            if key_predicate(key) and value_predicate(value)
        )

    # === Filtering and transforms ===

    def filter(self, predicate: Predicate) -> "NodeIterator":
        """Keep only nodes satisfying ``predicate``."""
        return NodeIterator(node for node in self if predicate(node))

    def iterate(self, transform: Callable[["NodeIterator"], Iterable]) -> "NodeIterator":
        """Wrap this iterator with custom stepping logic.

        ``transform`` receives this iterator and returns any iterable of
        nodes, typically a generator pulling from it.

        Example:
            >>> def doubled(nodes):
            ...     for node in nodes:
            ...         yield Node(NodeKind.SCALAR, node.value * 2)
            >>> from_node(a).iterate(doubled).iterate(doubled)
        """
        return NodeIterator(transform(self))

    # === Terminal operations ===

    def any_match(self, predicate: Predicate) -> bool:
        """Check whether any remaining node satisfies ``predicate``.

        Args:
            predicate: Test applied to each pulled node

        Returns:
            True at the first match, False once the iterator is exhausted
        """
        return aggregates.any_match(self, predicate)

    def all_match(self, predicate: Predicate) -> bool:
        """Check whether every remaining node satisfies ``predicate``.

        Args:
            predicate: Test applied to each pulled node

        Returns:
            False at the first failure, True once the iterator is exhausted
        """
        return aggregates.all_match(self, predicate)

    def to_list(self) -> List:
        """Drain the iterator.

        Returns:
            Remaining nodes in pull order
        """
        return aggregates.to_list(self)

    def count(self) -> int:
        """Drain the iterator.

        Returns:
            Number of nodes pulled
        """
        return aggregates.count(self)

    def first(self, default=None):
        """Pull a single node.

        Args:
            default: Returned when the iterator is already exhausted

        Returns:
            The next node, or ``default``
        """
        return aggregates.first(self, default)


def from_node(node) -> NodeIterator:
    """Iterator yielding ``node`` once."""
    return NodeIterator((node,))


def from_nodes(*nodes) -> NodeIterator:
    """Iterator yielding each argument once, in argument order."""
    return NodeIterator(nodes)


def from_iterators(*iterators: Iterable) -> NodeIterator:
    """Concatenate iterators.

    Each source is drained before the next one is pulled from.
    """
    return NodeIterator(chain.from_iterable(iterators))


def _children(source: Iterable) -> Iterator:
    for node in source:
        yield from node.children


def _pairs(source: Iterable) -> Iterator[Tuple[object, object]]:
    for node in source:
        yield from iter_pairs(node)


def _walk(source: Iterable, max_depth: Optional[int]) -> Iterator:
    """Depth-first pre-order walk using an explicit stack.

    The stack holds (children iterator, depth of those children) so tree
    depth is limited by heap rather than the interpreter's recursion limit.
    """
    for root in source:
        yield root
        if root.kind not in CONTAINER_KINDS or max_depth == 0:
            continue
        stack = [(iter(root.children), 1)]
        while stack:
            children, depth = stack[-1]
            child = next(children, _EXHAUSTED)
            if child is _EXHAUSTED:
                stack.pop()
                continue
            yield child
            if child.kind in CONTAINER_KINDS and (max_depth is None or depth < max_depth):
                stack.append((iter(child.children), depth + 1))

"""Test fixtures for nodeit consumers.

These helpers build small node trees without going through a parser, and
provide instrumentation to verify laziness: which nodes had their
children read, and how often a predicate was invoked.
"""

from typing import Dict, List, Optional

from ..core.node import Node, NodeKind
from ..core.predicates import Predicate


def scalar(value: str, tag: str = "!!str") -> Node:
    """Build a scalar node."""
    return Node(NodeKind.SCALAR, value, tag)


def sequence(*items: Node) -> Node:
    """Build a sequence node from already-built items."""
    return Node(NodeKind.SEQUENCE, tag="!!seq", children=list(items))


def mapping(pairs: Optional[Dict[str, Node]] = None, **kwargs: Node) -> Node:
    """Build a mapping node with scalar keys.

    Values may be nodes or plain strings (turned into scalars). Key order
    follows dict insertion order.

    Example:
        >>> mapping({"a": "b", "c": sequence(scalar("d"))})
    """
    items = dict(pairs or {}, **kwargs)
    children: List[Node] = []
    for key, value in items.items():
        children.append(scalar(key))
        children.append(value if isinstance(value, Node) else scalar(value))
    return Node(NodeKind.MAPPING, tag="!!map", children=children)


def document(root: Optional[Node] = None) -> Node:
    """Wrap a root content node in a document node."""
    return Node(NodeKind.DOCUMENT, children=[root] if root is not None else [])


def deep_chain(depth: int) -> Node:
    """Build a document holding ``depth`` nested single-item sequences."""
    leaf = scalar("leaf")
    node = leaf
    for _ in range(depth):
        node = sequence(node)
    return document(node)


class TrackedNode(Node):
    """Node that records every read of its children.

    All TrackedNodes sharing an ``access_log`` append themselves to it
    whenever ``children`` is read, so tests can assert that untouched
    subtrees were never visited.
    """

    __slots__ = ("_children", "access_log")

    def __init__(self, kind: NodeKind, value: str = "", tag: str = "",
                 children: Optional[List[Node]] = None,
                 access_log: Optional[List[Node]] = None):
        self.access_log = access_log if access_log is not None else []
        super().__init__(kind, value, tag, children)

    @property
    def children(self) -> List[Node]:
        self.access_log.append(self)
        return self._children

    @children.setter
    def children(self, value: List[Node]) -> None:
        self._children = value


class PredicateSpy:
    """Wrap a predicate and count how many times it is called.

    Example:
        spy = PredicateSpy(with_value("a"))
        from_nodes(x, y).filter(spy).to_list()
        assert spy.calls == 2
    """

    def __init__(self, predicate: Predicate):
        self.predicate = predicate
        self.calls = 0
        self.seen: List[Node] = []

    def __call__(self, node) -> bool:
        self.calls += 1
        self.seen.append(node)
        return self.predicate(node)

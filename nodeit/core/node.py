"""Node model for nodeit.

The Node is intentionally kept simple - it's a read-only data container
produced by an external document-tree builder. The iteration core only
ever reads ``kind``, ``value``, ``tag`` and ``children``, so any object
exposing those attributes can be traversed.
"""

from enum import Enum
from typing import Iterator, List, Optional, Tuple


class NodeKind(Enum):
    """Structural category of a document node."""
    DOCUMENT = "document"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SCALAR = "scalar"
    ALIAS = "alias"


# Kinds whose children are walked during recursion
CONTAINER_KINDS = frozenset({NodeKind.DOCUMENT, NodeKind.SEQUENCE, NodeKind.MAPPING})


class Node:
    """A single element of a document tree.

    For ``MAPPING`` nodes, ``children`` is a flat interleaving of
    key, value, key, value, ... in declaration order. For ``DOCUMENT`` and
    ``SEQUENCE`` nodes it is simply the ordered element list. Scalar and
    alias nodes carry their payload in ``value``.

    Nodes compare by identity: two nodes with the same content are still
    different elements of the tree.
    """

    __slots__ = ("kind", "value", "tag", "children", "anchor", "alias")

    def __init__(self,
                 kind: NodeKind,
                 value: str = "",
                 tag: str = "",
                 children: Optional[List["Node"]] = None,
                 anchor: str = "",
                 alias: Optional["Node"] = None):
        """Initialize a node.

        Args:
            kind: Structural kind of the node
            value: Scalar payload (scalar and alias nodes)
            tag: Short type tag, e.g. ``!!str``
            children: Ordered child references
            anchor: Anchor name declared on this node, if any
            alias: Target node when this is an alias
        """
        self.kind = kind
        self.value = value
        self.tag = tag
        self.children = children if children is not None else []
        self.anchor = anchor
        self.alias = alias

    def pairs(self) -> Iterator[Tuple["Node", "Node"]]:
        """Yield (key, value) pairs of a mapping node.

        Non-mapping nodes yield nothing.
        """
        return iter_pairs(self)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        parts = [self.kind.name]
        if self.value:
            parts.append(f"value={self.value!r}")
        if self.tag:
            parts.append(f"tag={self.tag!r}")
        if self.children:
            parts.append(f"children={len(self.children)}")
        return f"Node({', '.join(parts)})"


def iter_pairs(node) -> Iterator[Tuple[object, object]]:
    """Yield (key, value) pairs of any mapping-kind node.

    Works on duck-typed nodes that don't provide ``pairs()``.
    """
    if node.kind != NodeKind.MAPPING:
        return
    children = node.children
    for i in range(0, len(children) - 1, 2):
        yield children[i], children[i + 1]

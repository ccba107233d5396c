"""YAML adapter for nodeit.

This adapter builds nodeit trees from YAML text using PyYAML's event
stream. Building from events rather than from ``yaml.compose`` keeps
document boundaries and alias references visible: every document becomes
a DOCUMENT node and every ``*ref`` becomes an ALIAS node pointing at its
anchored target instead of being expanded in place.

Implicit tags are resolved the same way PyYAML's composer resolves them,
then shortened (``tag:yaml.org,2002:int`` becomes ``!!int``).
"""

import logging
from typing import IO, Dict, List, Optional, Union

import yaml
from yaml.resolver import Resolver

from ..core.node import Node, NodeKind

logger = logging.getLogger(__name__)

YAML_TAG_PREFIX = "tag:yaml.org,2002:"


class YAMLConversionError(ValueError):
    """Raised when a YAML event stream can't be turned into a node tree."""
    pass


def short_tag(tag: Optional[str]) -> str:
    """Shorten a full YAML core-schema tag to its ``!!`` form.

    Tags outside the core schema are returned unchanged.
    """
    if not tag:
        return ""
    if tag.startswith(YAML_TAG_PREFIX):
        return "!!" + tag[len(YAML_TAG_PREFIX):]
    return tag


class _TreeBuilder:
    """Assembles Node trees from a stream of PyYAML events.

    Open collections are kept on an explicit stack; each finished node is
    appended to the children of the collection on top of it.
    """

    def __init__(self):
        self.resolver = Resolver()
        self.documents: List[Node] = []
        self._stack: List[Node] = []
        self._anchors: Dict[str, Node] = {}

    def feed(self, event: yaml.Event) -> None:
        if isinstance(event, yaml.DocumentStartEvent):
            self._anchors = {}
            self._stack = [Node(NodeKind.DOCUMENT)]

        elif isinstance(event, yaml.DocumentEndEvent):
            self.documents.append(self._stack.pop())

        elif isinstance(event, yaml.ScalarEvent):
            tag = event.tag
            if tag is None or tag == "!":
                tag = self.resolver.resolve(yaml.ScalarNode, event.value, event.implicit)
            self._attach(Node(NodeKind.SCALAR, event.value, short_tag(tag)), event.anchor)

        elif isinstance(event, yaml.SequenceStartEvent):
            self._open(NodeKind.SEQUENCE, yaml.SequenceNode, event)

        elif isinstance(event, yaml.MappingStartEvent):
            self._open(NodeKind.MAPPING, yaml.MappingNode, event)

        elif isinstance(event, yaml.CollectionEndEvent):
            self._stack.pop()

        elif isinstance(event, yaml.AliasEvent):
            target = self._anchors.get(event.anchor)
            if target is None:
                raise YAMLConversionError(
                    f"found undefined alias {event.anchor!r}"
                    f" at line {event.start_mark.line + 1}"
                )
            self._attach(Node(NodeKind.ALIAS, event.anchor, alias=target), None)

    def _open(self, kind: NodeKind, yaml_kind, event) -> None:
        tag = event.tag
        if tag is None or tag == "!":
            tag = self.resolver.resolve(yaml_kind, None, event.implicit)
        node = Node(kind, tag=short_tag(tag))
        self._attach(node, event.anchor)
        self._stack.append(node)

    def _attach(self, node: Node, anchor: Optional[str]) -> None:
        if anchor is not None:
            node.anchor = anchor
            self._anchors[anchor] = node
        self._stack[-1].children.append(node)


def load_documents(stream: Union[str, bytes, IO]) -> List[Node]:
    """Parse every document of a YAML stream into DOCUMENT nodes.

    Args:
        stream: YAML text, bytes or an open file

    Returns:
        One DOCUMENT node per document, in stream order

    Raises:
        yaml.YAMLError: If the stream is not well-formed YAML
        YAMLConversionError: If an alias refers to an unknown anchor
    """
    builder = _TreeBuilder()
    for event in yaml.parse(stream, Loader=yaml.SafeLoader):
        builder.feed(event)
    logger.debug("Loaded %d YAML document(s)", len(builder.documents))
    return builder.documents


def load_document(stream: Union[str, bytes, IO]) -> Node:
    """Parse a single-document YAML stream.

    An empty stream yields a DOCUMENT node without children.

    Raises:
        YAMLConversionError: If the stream holds more than one document
    """
    documents = load_documents(stream)
    if not documents:
        return Node(NodeKind.DOCUMENT)
    if len(documents) > 1:
        raise YAMLConversionError(
            f"expected a single document in the stream, found {len(documents)}"
        )
    return documents[0]

"""High-level API for nodeit.

This module provides simple, functional interfaces for common traversal
tasks. These functions wrap the chainable NodeIterator API and the
TraversalConfig for ease of use in simple cases.
"""

import logging
from itertools import islice
from typing import IO, Iterator, Optional, Union

from .adapters.yaml_adapter import load_documents
from .config import DepthConfig, FilterConfig, TraversalConfig
from .core.iterator import _EXHAUSTED, NodeIterator, from_nodes
from .core.predicates import Predicate

logger = logging.getLogger(__name__)


def traverse_tree(root,
                  config: Optional[TraversalConfig] = None,
                  **kwargs) -> NodeIterator:
    """Simple interface for walking a node tree.

    Walks ``root`` depth-first, pre-order, yielding the nodes allowed by
    the depth bounds and filters of ``config``. When no config is passed
    one is built from keyword arguments.

    Args:
        root: Starting node for traversal
        config: Complete traversal configuration
        **kwargs: max_depth, min_depth, include_filter, exclude_filter,
            prune_on_exclude, max_nodes

    Returns:
        NodeIterator over the selected nodes

    Raises:
        ConfigurationError: If the configuration is invalid
        TypeError: If both config and keyword options are given

    Example:
        >>> doc = load_document("a: {b: c}")
        >>> [n.value for n in traverse_tree(doc, min_depth=2)]
        ['a', '', 'b', 'c']
    """
    if config is None:
        config = _build_config_from_kwargs(**kwargs)
    elif kwargs:
        raise TypeError("Pass either a TraversalConfig or keyword options, not both")
    config.check()

    nodes = _walk_with_config(root, config)
    if config.max_nodes is not None:
        nodes = islice(nodes, config.max_nodes)
    return NodeIterator(nodes)


def find_nodes(root, predicate: Predicate, **kwargs) -> NodeIterator:
    """Find nodes that match a predicate.

    Example:
        >>> for node in find_nodes(doc, with_map_key("image")):
        ...     print(node)
    """
    kwargs["include_filter"] = predicate
    return traverse_tree(root, **kwargs)


def count_nodes(root, **kwargs) -> int:
    """Count nodes in a tree that match the traversal options."""
    return traverse_tree(root, **kwargs).count()


def iterate_yaml(stream: Union[str, bytes, IO]) -> NodeIterator:
    """Iterator over the document nodes of a YAML stream."""
    return from_nodes(*load_documents(stream))


def _build_config_from_kwargs(max_depth: Optional[int] = None,
                              min_depth: int = 0,
                              include_filter: Optional[Predicate] = None,
                              exclude_filter: Optional[Predicate] = None,
                              prune_on_exclude: bool = False,
                              max_nodes: Optional[int] = None) -> TraversalConfig:
    """Build a TraversalConfig from keyword arguments."""
    config = TraversalConfig(
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter,
            prune_on_exclude=prune_on_exclude,
        ),
        max_nodes=max_nodes,
    )
    logger.debug("Built traversal config: %s", config)
    return config


def _walk_with_config(root, config: TraversalConfig) -> Iterator:
    """Pre-order walk tracking depth, with an explicit stack."""
    depth_config = config.depth
    filter_config = config.filter

    stack = [(iter((root,)), 0)]
    while stack:
        nodes, depth = stack[-1]
        node = next(nodes, _EXHAUSTED)
        if node is _EXHAUSTED:
            stack.pop()
            continue

        if depth_config.should_yield(depth) and filter_config.should_include(node):
            yield node

        if depth_config.should_explore(depth) and filter_config.should_explore_children(node):
            stack.append((iter(node.children), depth + 1))

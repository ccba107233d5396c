"""nodeit - Lazy iteration over document node trees.

nodeit traverses, filters, transforms and aggregates the nodes of a
tagged document tree (the kind of tree a YAML parser produces) without
materializing intermediate collections and without mutating the tree.

Typical use:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from nodeit import load_document, from_node, with_kind, NodeKind

    doc = load_document(text)
    keys = (from_node(doc)
            .recurse_nodes()
            .filter(with_kind(NodeKind.MAPPING))
            .map_keys()
            .to_list())
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.1.0"

from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .config import (
    ConfigurationError,
    DepthConfig,
    FilterConfig,
    TraversalConfig,
)
from .adapters import YAMLConversionError, load_document, load_documents
from .api import traverse_tree, find_nodes, count_nodes, iterate_yaml

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    *_core_all,
    # Config
    "ConfigurationError",
    "DepthConfig",
    "FilterConfig",
    "TraversalConfig",
    # Adapters
    "YAMLConversionError",
    "load_document",
    "load_documents",
    # API
    "traverse_tree",
    "find_nodes",
    "count_nodes",
    "iterate_yaml",
]

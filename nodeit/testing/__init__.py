"""Testing utilities for nodeit."""

from .fixtures import (
    PredicateSpy,
    TrackedNode,
    deep_chain,
    document,
    mapping,
    scalar,
    sequence,
)

__all__ = [
    "PredicateSpy",
    "TrackedNode",
    "deep_chain",
    "document",
    "mapping",
    "scalar",
    "sequence",
]

"""Adapters that build nodeit trees from serialized documents."""

from .yaml_adapter import (
    YAMLConversionError,
    load_document,
    load_documents,
    short_tag,
)

__all__ = [
    "YAMLConversionError",
    "load_document",
    "load_documents",
    "short_tag",
]

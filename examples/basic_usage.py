#!/usr/bin/env python3
"""
Basic example showing lazy queries over a YAML document with nodeit.

This example demonstrates:
- Loading YAML into a node tree
- Chaining recursion, filtering and map extraction
- Building predicates out of combinators

Usage:
    python examples/basic_usage.py [file.yaml]
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from nodeit import (
    NodeKind,
    count_nodes,
    intersect,
    iterate_yaml,
    with_kind,
    with_map_key,
    with_short_tag,
    with_value,
)

SAMPLE = """\
services:
  web:
    image: nginx:1.25
    ports: [80, 443]
  cache:
    image: redis:7
    replicas: 2
---
services:
  worker:
    image: python:3.12
"""


def main():
    """Report images and integer settings found in a YAML stream."""
    text = Path(sys.argv[1]).read_text() if len(sys.argv) > 1 else SAMPLE

    print("Images:")
    images = (iterate_yaml(text)
              .recurse_nodes()
              .filter(intersect(with_kind(NodeKind.MAPPING), with_map_key("image")))
              .values_for_map(with_value("image"), with_kind(NodeKind.SCALAR)))
    for node in images:
        print(f"  {node.value}")

    integers = (iterate_yaml(text)
                .recurse_nodes()
                .filter(with_short_tag("!!int"))
                .to_list())
    print(f"\nInteger scalars: {', '.join(node.value for node in integers)}")

    total = sum(count_nodes(doc) for doc in iterate_yaml(text))
    print(f"Total nodes: {total:,}")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Example: Quickstart for tagtree.

Build a small tree with the generic constructors and render it to bytes
and to a string.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install tagtree
"""
from __future__ import annotations

import io

import tagtree
from tagtree import attr, el, group, text


def main() -> None:
    print(f"tagtree version: {tagtree.__version__}")

    fruits = ["apple", "banana", "cherry & co"]

    # Step 1: Build a tree. Attributes may appear anywhere among the children.
    node = el(
        "ul",
        attr("class", "fruits"),
        group(el("li", text(fruit)) for fruit in fruits),
        attr("id", "basket"),
    )

    # Step 2: Render into any binary sink
    buffer = io.BytesIO()
    node.render(buffer)
    print(buffer.getvalue())

    # Step 3: Or just convert to text
    print(str(node))

    # Void elements never get an end tag
    print(el("input", attr("type", "text"), attr("required")))


if __name__ == "__main__":
    main()

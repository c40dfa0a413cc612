"""Node variants and their constructors.

Exports every node type together with the functions used to build
trees.  ``tagtree`` re-exports the same names at top level.
"""
from __future__ import annotations

from tagtree.nodes.attribute import Attribute, attr
from tagtree.nodes.base import (
    Node,
    NodeFunc,
    NodeType,
    flatten,
    node_type_of,
    render_to_bytes,
    render_to_string,
    write_node,
)
from tagtree.nodes.containers import Fragment, Group, Static, fragment, group, static
from tagtree.nodes.element import VOID_ELEMENTS, Element, el, is_void_element
from tagtree.nodes.helpers import foreach, foreach_indexed, if_, loop_times, map_
from tagtree.nodes.text import Text, raw, rawf, text, textf

__all__ = [
    # Core types
    "Node",
    "NodeType",
    "NodeFunc",
    "Element",
    "Attribute",
    "Text",
    "Group",
    "Fragment",
    "Static",
    # Constructors
    "el",
    "attr",
    "text",
    "textf",
    "raw",
    "rawf",
    "group",
    "fragment",
    "static",
    # Helpers
    "if_",
    "map_",
    "foreach",
    "foreach_indexed",
    "loop_times",
    # Rendering
    "render_to_bytes",
    "render_to_string",
    "write_node",
    "flatten",
    "node_type_of",
    # Void elements
    "VOID_ELEMENTS",
    "is_void_element",
]

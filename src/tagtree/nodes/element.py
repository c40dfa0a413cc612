"""Element nodes and the opening-tag/content partitioning algorithm.

An element writes, in order:

1. ``<`` and its name.
2. Every attribute child, in encounter order, except ``class`` values,
   which are collected instead.
3. One merged ``class="..."`` token if any class values were collected.
4. ``>``.
5. For non-void elements: every non-attribute child in encounter order,
   then ``</name>``.

Groups among the children are flattened recursively before both passes,
so a group behaves exactly as if its children had been passed inline.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tagtree.escape import escape_html
from tagtree.nodes.attribute import Attribute
from tagtree.nodes.base import Node, NodeType, flatten, node_type_of, write_node
from tagtree.writer import StatefulWriter

# Elements that never have an end tag or content.
# See https://html.spec.whatwg.org/multipage/syntax.html#void-elements
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


def is_void_element(name: str) -> bool:
    """Return True if ``name`` is rendered without content or end tag."""
    return name in VOID_ELEMENTS


@dataclass(frozen=True, slots=True)
class Element(Node):
    """A tagged element with ordered children.

    Children may be attributes, other elements, text, groups, fragments,
    ``None`` or any duck-typed node; they are classified at render time.
    For void elements non-attribute children are ignored.
    """

    name: str
    children: tuple[Any, ...] = ()

    @property
    def is_void(self) -> bool:
        return is_void_element(self.name)

    def write_to(self, writer: StatefulWriter) -> None:
        if writer.failed:
            return

        writer.write("<")
        writer.write(self.name)

        class_values: list[str] = []
        for child in flatten(self.children):
            if node_type_of(child) is not NodeType.ATTRIBUTE:
                continue
            if (
                isinstance(child, Attribute)
                and child.name == "class"
                and child.value is not None
            ):
                class_values.append(child.value)
            else:
                write_node(writer, child)

        if class_values:
            writer.write(' class="')
            writer.write(escape_html(" ".join(class_values)))
            writer.write('"')

        writer.write(">")

        if self.is_void:
            return

        for child in flatten(self.children):
            if node_type_of(child) is NodeType.ELEMENT:
                write_node(writer, child)

        writer.write("</")
        writer.write(self.name)
        writer.write(">")


def el(name: str, *children: Any) -> Element:
    """Create an element named ``name`` with ``children``.

    Use this for any tag without a helper in ``tagtree.html``, e.g.
    custom elements such as ``el("sl-divider")``.
    """
    return Element(name=name, children=children)

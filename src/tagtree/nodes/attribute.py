"""Attribute nodes."""
from __future__ import annotations

from dataclasses import dataclass

from tagtree.errors import AttributeArityError
from tagtree.escape import escape_html
from tagtree.nodes.base import Node, NodeType
from tagtree.writer import StatefulWriter


@dataclass(frozen=True, slots=True)
class Attribute(Node):
    """A name with an optional value.

    Without a value it renders as a boolean attribute (`` required``);
    with one it renders as `` name="value"`` with the value escaped.
    """

    name: str
    value: str | None = None

    @property
    def node_type(self) -> NodeType:  # type: ignore[override]
        return NodeType.ATTRIBUTE

    @property
    def is_boolean(self) -> bool:
        return self.value is None

    def write_to(self, writer: StatefulWriter) -> None:
        if writer.failed:
            return
        writer.write(" ")
        writer.write(self.name)
        if self.value is None:
            return
        writer.write('="')
        writer.write(escape_html(self.value))
        writer.write('"')


def attr(name: str, *value: str) -> Attribute:
    """Create an attribute named ``name``.

    Pass no value for a boolean attribute such as ``required`` and one
    value for a name/value pair such as ``type="text"``.

    Raises
    ------
    AttributeArityError
        If more than one value is given.
    """
    if len(value) > 1:
        raise AttributeArityError(name, len(value))
    return Attribute(name=name, value=value[0] if value else None)

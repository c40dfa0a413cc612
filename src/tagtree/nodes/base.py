"""The node abstraction shared by every tagtree variant.

A node is an immutable description of a piece of markup that can write
itself to a sink.  Nodes carry a ``NodeType`` that tells a parent
element where they belong: ``ATTRIBUTE`` nodes are written inside the
opening tag, everything else between the opening and closing tags.

Third-party objects take part without subclassing ``Node``: anything
with a ``render(sink)`` method may appear as a child.  Such objects are
classified as ``ELEMENT`` unless they expose a ``node_type`` attribute.
"""
from __future__ import annotations

import io
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from tagtree.writer import Sink, StatefulWriter


class NodeType(Enum):
    """Where a node is rendered inside its parent element."""

    ELEMENT = auto()
    ATTRIBUTE = auto()


class Node(ABC):
    """Abstract base for renderable nodes.

    Subclasses implement ``write_to``; ``render`` wraps the sink in a
    fresh ``StatefulWriter`` so that one render call owns one error state.
    """

    __slots__ = ()

    node_type: NodeType = NodeType.ELEMENT

    @abstractmethod
    def write_to(self, writer: StatefulWriter) -> None:
        """Write this node through ``writer``; must be a no-op once it failed."""

    def render(self, sink: Sink) -> None:
        """Render this node to ``sink``.

        Raises
        ------
        OSError
            The first error raised by ``sink.write``, unchanged.  Bytes
            written before the failure stay written.
        """
        writer = StatefulWriter(sink)
        self.write_to(writer)
        writer.raise_for_error()

    def __str__(self) -> str:
        return render_to_string(self)


def node_type_of(node: Any) -> NodeType:
    """Return the classification of ``node``, defaulting to ``ELEMENT``."""
    return getattr(node, "node_type", NodeType.ELEMENT)


def write_node(writer: StatefulWriter, node: Any) -> None:
    """Write ``node`` through ``writer``, whatever kind of node it is.

    ``None`` is skipped.  ``Node`` instances share the writer directly;
    duck-typed nodes get the writer as their sink, and any ``OSError``
    they raise themselves is recorded instead of propagated.
    """
    if node is None or writer.failed:
        return
    if isinstance(node, Node):
        node.write_to(writer)
        return
    try:
        node.render(writer)
    except OSError as exc:
        writer.record(exc)


def flatten(children: Any) -> Iterator[Any]:
    """Yield ``children`` with nested groups spliced in place and ``None`` dropped."""
    from tagtree.nodes.containers import Group

    for child in children:
        if child is None:
            continue
        if isinstance(child, Group):
            yield from flatten(child.children)
        else:
            yield child


def render_to_bytes(node: Any) -> bytes:
    """Render ``node`` into memory and return the UTF-8 bytes."""
    buffer = io.BytesIO()
    node.render(buffer)
    return buffer.getvalue()


def render_to_string(node: Any) -> str:
    """Render ``node`` into memory and return the markup as text."""
    return render_to_bytes(node).decode("utf-8")


@dataclass(frozen=True, eq=False, slots=True)
class NodeFunc(Node):
    """A render function wrapped as a node.

    ``fn`` receives the sink (during a tree render, the shared
    ``StatefulWriter``) and writes to it.  The classification is explicit
    and defaults to ``ELEMENT``.

    Parameters
    ----------
    fn:
        Callable writing markup to the sink it is given.
    node_type:
        Where a parent element should place the output.
    """

    fn: Callable[[Any], object]
    node_type: NodeType = NodeType.ELEMENT

    def write_to(self, writer: StatefulWriter) -> None:
        if writer.failed:
            return
        try:
            self.fn(writer)
        except OSError as exc:
            writer.record(exc)

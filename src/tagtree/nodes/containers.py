"""Container nodes: groups, fragments and static snapshots.

``Group``
    Splices a list of nodes into the child list of its parent.  It is
    structural only; rendering it on its own is a programming error.
``Fragment``
    A renderable list of siblings, like a document fragment.
``Static``
    A fragment rendered once at construction time.  Later renders replay
    the captured bytes without walking the tree again, which suits
    content that never changes, such as an inline stylesheet.
"""
from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from tagtree.errors import GroupRenderError
from tagtree.nodes.base import Node, flatten, write_node
from tagtree.writer import Sink, StatefulWriter

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Group(Node):
    """Children to be spliced into a parent element, fragment or group."""

    children: tuple[Any, ...] = ()

    def write_to(self, writer: StatefulWriter) -> None:
        raise GroupRenderError()

    def render(self, sink: Sink) -> None:
        raise GroupRenderError()

    def __str__(self) -> str:
        raise GroupRenderError()


@dataclass(frozen=True, slots=True)
class Fragment(Node):
    """Siblings rendered one after another into the same sink."""

    children: tuple[Any, ...] = ()

    def write_to(self, writer: StatefulWriter) -> None:
        for child in flatten(self.children):
            if writer.failed:
                return
            write_node(writer, child)


@dataclass(frozen=True, slots=True)
class Static(Node):
    """Pre-rendered markup replayed verbatim on every render.

    Build instances with ``static()``.  ``error`` holds the ``OSError``
    raised while capturing, in which case every render raises it again.
    """

    data: bytes = b""
    error: OSError | None = None

    def write_to(self, writer: StatefulWriter) -> None:
        if writer.failed:
            return
        if self.error is not None:
            writer.record(self.error)
            return
        writer.write(self.data)


def group(children: Iterable[Any]) -> Group:
    """Group ``children`` for splicing into a parent node.

    Useful for passing a list of nodes where a single child is expected::

        el("ul", group(el("li", text(name)) for name in names))

    The result cannot be rendered on its own.
    """
    return Group(children=tuple(children))


def fragment(*children: Any) -> Fragment:
    """Create a renderable list of sibling nodes."""
    return Fragment(children=children)


def static(*children: Any) -> Static:
    """Render ``children`` once and return a node replaying the result."""
    buffer = io.BytesIO()
    try:
        Fragment(children=children).render(buffer)
    except OSError as exc:
        logger.debug("Static capture failed after %d bytes: %s", buffer.tell(), exc)
        return Static(data=buffer.getvalue(), error=exc)
    data = buffer.getvalue()
    logger.debug("Captured static snapshot of %d bytes from %d children", len(data), len(children))
    return Static(data=data)

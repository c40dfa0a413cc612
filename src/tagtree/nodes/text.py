"""Text leaves: escaped and raw, plain and formatted."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tagtree.escape import escape_html
from tagtree.nodes.base import Node
from tagtree.writer import StatefulWriter


@dataclass(frozen=True, slots=True)
class Text(Node):
    """A string payload, HTML-escaped unless ``escape`` is False."""

    content: str
    escape: bool = True

    def write_to(self, writer: StatefulWriter) -> None:
        if writer.failed:
            return
        writer.write(escape_html(self.content) if self.escape else self.content)


def text(content: str) -> Text:
    """Create a text node that renders ``content`` HTML-escaped."""
    return Text(content=content)


def textf(template: str, /, *args: Any, **kwargs: Any) -> Text:
    """Create an escaped text node from ``template.format(*args, **kwargs)``."""
    return Text(content=template.format(*args, **kwargs))


def raw(content: str) -> Text:
    """Create a text node that renders ``content`` verbatim.

    The caller is responsible for ``content`` being well-formed markup.
    """
    return Text(content=content, escape=False)


def rawf(template: str, /, *args: Any, **kwargs: Any) -> Text:
    """Create a verbatim text node from ``template.format(*args, **kwargs)``."""
    return Text(content=template.format(*args, **kwargs), escape=False)

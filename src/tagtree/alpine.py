"""Attribute helpers for Alpine.js (https://alpinejs.dev)."""
from __future__ import annotations

from tagtree.nodes import Attribute, attr


def data(value: str) -> Attribute: return attr("x-data", value)
def init(value: str) -> Attribute: return attr("x-init", value)
def show(value: str) -> Attribute: return attr("x-show", value)


def on(value: str, handler: str | None = None) -> Attribute:
    """Create an ``x-on`` listener.

    With one argument the value goes into a plain ``x-on`` attribute.  With
    two, the first names the event: ``on("click", "open = true")`` gives
    ``x-on:click="open = true"``.
    """
    if handler is None:
        return attr("x-on", value)
    return attr("x-on:" + value, handler)


def bind(attribute: str, expression: str) -> Attribute:
    """Create ``x-bind:<attribute>``."""
    return attr("x-bind:" + attribute, expression)

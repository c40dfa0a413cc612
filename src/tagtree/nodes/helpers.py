"""Helpers for conditional and repeated content."""
from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

from tagtree.nodes.base import NodeFunc, write_node
from tagtree.writer import StatefulWriter

T = TypeVar("T")


def if_(condition: bool, node: Any) -> Any:
    """Return ``node`` when ``condition`` holds, otherwise ``None``.

    ``None`` children are skipped everywhere, so this inlines optional
    content::

        el("li", if_(active, class_("is-active")), text(label))
    """
    return node if condition else None


def map_(items: Iterable[T], fn: Callable[[T], Any]) -> list[Any]:
    """Return ``[fn(item) for item in items]``, ready to wrap in ``group``."""
    return [fn(item) for item in items]


def foreach(items: Iterable[T], fn: Callable[[T], Any]) -> NodeFunc:
    """Return a node rendering ``fn(item)`` for each item at render time.

    Results that are ``None`` are skipped.  ``items`` is iterated on every
    render, so pass a sequence if the node is rendered more than once.
    """

    def _render(writer: StatefulWriter) -> None:
        for item in items:
            if writer.failed:
                return
            write_node(writer, fn(item))

    return NodeFunc(_render)


def foreach_indexed(items: Sequence[T], fn: Callable[[str, T], Any]) -> NodeFunc:
    """Like ``foreach`` but ``fn`` also receives the index as a string."""

    def _render(writer: StatefulWriter) -> None:
        for index, item in enumerate(items):
            if writer.failed:
                return
            write_node(writer, fn(str(index), item))

    return NodeFunc(_render)


def loop_times(times: int, fn: Callable[[int], Any]) -> NodeFunc:
    """Return a node rendering ``fn(i)`` for ``i`` in ``range(times)``."""

    def _render(writer: StatefulWriter) -> None:
        for i in range(times):
            if writer.failed:
                return
            write_node(writer, fn(i))

    return NodeFunc(_render)

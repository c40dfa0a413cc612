"""Higher-level components built from the HTML catalog."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from tagtree.html.attributes import charset, class_, content, lang, name
from tagtree.html.elements import body, doctype, head, html, meta, title_el
from tagtree.nodes import Attribute, NodeFunc, group, if_, text


def classes(mapping: Mapping[str, bool]) -> Attribute | None:
    """Return a ``class`` attribute listing the keys whose value is truthy.

    Class names are sorted so the output does not depend on insertion
    order.  Returns ``None`` (rendered as nothing) when no key is set::

        el("a", classes({"nav-link": True, "is-active": path == "/"}))
    """
    included = sorted(key for key, enabled in mapping.items() if enabled)
    if not included:
        return None
    return class_(" ".join(included))


def html5(
    title: str,
    *,
    language: str | None = None,
    description: str | None = None,
    head_nodes: Iterable[Any] = (),
    body_nodes: Iterable[Any] = (),
    html_attrs: Iterable[Any] = (),
) -> NodeFunc:
    """Return a complete HTML5 document.

    Parameters
    ----------
    title:
        Text of the ``<title>`` element.
    language:
        Value of the ``lang`` attribute on ``<html>``, omitted when empty.
    description:
        Content of a ``<meta name="description">`` tag, omitted when empty.
    head_nodes:
        Extra children appended to ``<head>``.
    body_nodes:
        Children of ``<body>``.
    html_attrs:
        Extra attributes for the ``<html>`` element.
    """
    return doctype(
        html(
            if_(bool(language), lang(language or "")),
            group(html_attrs),
            head(
                meta(charset("utf-8")),
                meta(name("viewport"), content("width=device-width, initial-scale=1")),
                title_el(text(title)),
                if_(bool(description), meta(name("description"), content(description or ""))),
                group(head_nodes),
            ),
            body(group(body_nodes)),
        )
    )


__all__ = ["classes", "html5"]

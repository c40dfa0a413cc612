#!/usr/bin/env python3
"""Example: A full page with a navbar.

Uses the HTML catalog, the HTML5 component and a class map to highlight
the active link, and writes the page to stdout.

Usage:
    python examples/02_page.py /foo

Requirements:
    pip install tagtree
"""
from __future__ import annotations

import sys
from dataclasses import dataclass

from tagtree import Node
from tagtree.components import classes, html5
from tagtree.html import a, div, foreach, h1, hr, href, li, p, raw, static, style_el, text, textf, type_, ul

# Rendered once at import; every page replays the same bytes.
STYLES = static(
    style_el(
        type_("text/css"),
        raw("html { font-family: sans-serif; }"),
        raw("ul { list-style-type: none; margin: 0; padding: 0; overflow: hidden; }"),
        raw("ul li { display: block; padding: 8px; float: left; }"),
        raw(".is-active { font-weight: bold; }"),
    )
)


@dataclass(frozen=True)
class PageLink:
    path: str
    name: str


def navbar_link(link: PageLink, current_path: str) -> Node:
    return li(a(href(link.path), classes({"is-active": current_path == link.path}), text(link.name)))


def navbar(current_path: str, links: list[PageLink]) -> Node:
    return div(
        ul(
            navbar_link(PageLink("/", "Home"), current_path),
            foreach(links, lambda link: navbar_link(link, current_path)),
        ),
        hr(),
    )


def page(path: str) -> Node:
    return html5(
        path,
        language="en",
        head_nodes=[STYLES],
        body_nodes=[
            navbar(path, [PageLink("/foo", "Foo"), PageLink("/bar", "Bar")]),
            h1(text(path)),
            p(textf("Welcome to the page at {}.", path)),
        ],
    )


def main() -> None:
    path = sys.argv[1] if len(sys.argv) > 1 else "/"
    page(path).render(sys.stdout.buffer)
    sys.stdout.buffer.write(b"\n")


if __name__ == "__main__":
    main()

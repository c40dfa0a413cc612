"""Sample pages shared by the tagtree benchmarks."""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tagtree import Node, group, static
from tagtree.components import classes, html5
from tagtree.html import (
    a,
    class_,
    href,
    li,
    nav,
    raw,
    style_el,
    table,
    td,
    text,
    textf,
    th,
    thead,
    tr,
    ul,
)

_STYLES = (
    "html { font-family: sans-serif; }",
    "ul { list-style-type: none; margin: 0; padding: 0; overflow: hidden; }",
    "ul li { display: block; padding: 8px; float: left; }",
    ".is-active { font-weight: bold; }",
)


def build_page(rows: int = 50, *, static_head: bool = False) -> Node:
    """Return an HTML5 page with a navbar and a ``rows``-row table."""
    stylesheet = style_el(group(raw(rule) for rule in _STYLES))
    head = static(stylesheet) if static_head else stylesheet
    links = [("/", "Home"), ("/foo", "Foo"), ("/bar", "Bar")]
    return html5(
        "Benchmark",
        language="en",
        head_nodes=[head],
        body_nodes=[
            nav(
                ul(
                    group(
                        li(a(href(path), classes({"is-active": path == "/foo"}), text(name)))
                        for path, name in links
                    )
                )
            ),
            table(
                class_("data"),
                thead(tr(th(text("#")), th(text("Name")), th(text("Score")))),
                group(
                    tr(
                        class_("row"),
                        td(textf("{}", i)),
                        td(text(f"item <{i}> & co")),
                        td(textf("{:.2f}", i * 1.5)),
                    )
                    for i in range(rows)
                ),
            ),
        ],
    )

"""HTML element and attribute constructors.

Import the helpers you need, or the whole catalog::

    from tagtree.html import a, class_, div, href, li, text, ul

Text and grouping helpers from ``tagtree`` are re-exported so a page can
be written against this module alone.
"""
from __future__ import annotations

from tagtree.html.attributes import *  # noqa: F403
from tagtree.html.attributes import __all__ as _attribute_names
from tagtree.html.elements import *  # noqa: F403
from tagtree.html.elements import __all__ as _element_names
from tagtree.nodes import (
    attr,
    el,
    foreach,
    foreach_indexed,
    fragment,
    group,
    if_,
    loop_times,
    map_,
    raw,
    rawf,
    static,
    text,
    textf,
)

__all__ = [
    *_element_names,
    *_attribute_names,
    "attr",
    "el",
    "text",
    "textf",
    "raw",
    "rawf",
    "group",
    "fragment",
    "static",
    "if_",
    "map_",
    "foreach",
    "foreach_indexed",
    "loop_times",
]

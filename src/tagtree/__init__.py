"""tagtree — build HTML as a tree of Python values and stream it to bytes.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import io
    from tagtree import attr, el, group, text

    names = ["Ada", "Grace"]
    page = el(
        "ul",
        attr("class", "people"),
        group(el("li", text(name)) for name in names),
    )

    buffer = io.BytesIO()
    page.render(buffer)
    buffer.getvalue()
    b'<ul class="people"><li>Ada</li><li>Grace</li></ul>'

    str(page)
    '<ul class="people"><li>Ada</li><li>Grace</li></ul>'

    tagtree.__version__
    '0.1.0'
"""
from __future__ import annotations

__version__: str = "0.1.0"

from tagtree.errors import (
    AttributeArityError,
    ConstructionError,
    GroupRenderError,
    TagTreeError,
    TreeFormatError,
    UnknownElementError,
    UnknownMethodError,
)
from tagtree.escape import escape_html
from tagtree.nodes import (
    VOID_ELEMENTS,
    Attribute,
    Element,
    Fragment,
    Group,
    Node,
    NodeFunc,
    NodeType,
    Static,
    Text,
    attr,
    el,
    foreach,
    foreach_indexed,
    fragment,
    group,
    if_,
    is_void_element,
    loop_times,
    map_,
    raw,
    rawf,
    render_to_bytes,
    render_to_string,
    static,
    text,
    textf,
)
from tagtree.writer import StatefulWriter

__all__ = [
    "__version__",
    # Nodes
    "Node",
    "NodeType",
    "NodeFunc",
    "Element",
    "Attribute",
    "Text",
    "Group",
    "Fragment",
    "Static",
    # Constructors
    "el",
    "attr",
    "text",
    "textf",
    "raw",
    "rawf",
    "group",
    "fragment",
    "static",
    # Helpers
    "if_",
    "map_",
    "foreach",
    "foreach_indexed",
    "loop_times",
    # Rendering
    "render_to_bytes",
    "render_to_string",
    "escape_html",
    "StatefulWriter",
    "VOID_ELEMENTS",
    "is_void_element",
    # Errors
    "TagTreeError",
    "ConstructionError",
    "AttributeArityError",
    "GroupRenderError",
    "UnknownElementError",
    "UnknownMethodError",
    "TreeFormatError",
]

"""HTML attribute constructors.

Boolean attributes take no arguments, valued attributes take the value.
Names that clash with Python keywords or builtins end in ``_``
(``class_``, ``for_``, ``id_``, ``type_`` ...) and names shared with an
element helper end in ``_attr`` (``form_attr``, ``style_attr``,
``title_attr``).
"""
from __future__ import annotations

from tagtree.nodes import Attribute, attr


def aria(name: str, value: str) -> Attribute:
    """Create an ``aria-<name>`` attribute."""
    return attr("aria-" + name, value)


def data_attr(name: str, value: str) -> Attribute:
    """Create a ``data-<name>`` attribute."""
    return attr("data-" + name, value)


# Boolean attributes
def async_() -> Attribute: return attr("async")
def autofocus() -> Attribute: return attr("autofocus")
def autoplay() -> Attribute: return attr("autoplay")
def checked() -> Attribute: return attr("checked")
def controls() -> Attribute: return attr("controls")
def defer() -> Attribute: return attr("defer")
def disabled() -> Attribute: return attr("disabled")
def hidden() -> Attribute: return attr("hidden")
def loop() -> Attribute: return attr("loop")
def multiple() -> Attribute: return attr("multiple")
def muted() -> Attribute: return attr("muted")
def playsinline() -> Attribute: return attr("playsinline")
def readonly() -> Attribute: return attr("readonly")
def required() -> Attribute: return attr("required")
def selected() -> Attribute: return attr("selected")


# Valued attributes
def accept(v: str) -> Attribute: return attr("accept", v)
def action(v: str) -> Attribute: return attr("action", v)
def alt(v: str) -> Attribute: return attr("alt", v)
def as_(v: str) -> Attribute: return attr("as", v)
def autocomplete(v: str) -> Attribute: return attr("autocomplete", v)
def charset(v: str) -> Attribute: return attr("charset", v)
def class_(v: str) -> Attribute: return attr("class", v)
def cols(v: str) -> Attribute: return attr("cols", v)
def colspan(v: str) -> Attribute: return attr("colspan", v)
def content(v: str) -> Attribute: return attr("content", v)
def enctype(v: str) -> Attribute: return attr("enctype", v)
def for_(v: str) -> Attribute: return attr("for", v)
def form_attr(v: str) -> Attribute: return attr("form", v)
def height(v: str) -> Attribute: return attr("height", v)
def href(v: str) -> Attribute: return attr("href", v)
def id_(v: str) -> Attribute: return attr("id", v)
def lang(v: str) -> Attribute: return attr("lang", v)
def loading(v: str) -> Attribute: return attr("loading", v)
def max_(v: str) -> Attribute: return attr("max", v)
def maxlength(v: str) -> Attribute: return attr("maxlength", v)
def method(v: str) -> Attribute: return attr("method", v)
def min_(v: str) -> Attribute: return attr("min", v)
def minlength(v: str) -> Attribute: return attr("minlength", v)
def name(v: str) -> Attribute: return attr("name", v)
def pattern(v: str) -> Attribute: return attr("pattern", v)
def placeholder(v: str) -> Attribute: return attr("placeholder", v)
def poster(v: str) -> Attribute: return attr("poster", v)
def preload(v: str) -> Attribute: return attr("preload", v)
def rel(v: str) -> Attribute: return attr("rel", v)
def role(v: str) -> Attribute: return attr("role", v)
def rows(v: str) -> Attribute: return attr("rows", v)
def rowspan(v: str) -> Attribute: return attr("rowspan", v)
def slot(v: str) -> Attribute: return attr("slot", v)
def src(v: str) -> Attribute: return attr("src", v)
def srcset(v: str) -> Attribute: return attr("srcset", v)
def step(v: str) -> Attribute: return attr("step", v)
def style_attr(v: str) -> Attribute: return attr("style", v)
def tabindex(v: str) -> Attribute: return attr("tabindex", v)
def target(v: str) -> Attribute: return attr("target", v)
def title_attr(v: str) -> Attribute: return attr("title", v)
def type_(v: str) -> Attribute: return attr("type", v)
def value(v: str) -> Attribute: return attr("value", v)
def width(v: str) -> Attribute: return attr("width", v)


__all__ = [
    "aria",
    "data_attr",
    "async_",
    "autofocus",
    "autoplay",
    "checked",
    "controls",
    "defer",
    "disabled",
    "hidden",
    "loop",
    "multiple",
    "muted",
    "playsinline",
    "readonly",
    "required",
    "selected",
    "accept",
    "action",
    "alt",
    "as_",
    "autocomplete",
    "charset",
    "class_",
    "cols",
    "colspan",
    "content",
    "enctype",
    "for_",
    "form_attr",
    "height",
    "href",
    "id_",
    "lang",
    "loading",
    "max_",
    "maxlength",
    "method",
    "min_",
    "minlength",
    "name",
    "pattern",
    "placeholder",
    "poster",
    "preload",
    "rel",
    "role",
    "rows",
    "rowspan",
    "slot",
    "src",
    "srcset",
    "step",
    "style_attr",
    "tabindex",
    "target",
    "title_attr",
    "type_",
    "value",
    "width",
]

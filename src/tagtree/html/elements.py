"""HTML element constructors.

One function per element, each a thin wrapper over ``tagtree.el``.
Names that clash with Python keywords or builtins end in ``_`` and names
shared with an attribute helper end in ``_el`` (``form_el``,
``style_el``, ``title_el``, ``data_el``).

Void elements (``br``, ``img``, ``input_`` ...) accept children like any
other element, but only their attributes are rendered.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

from tagtree.errors import UnknownElementError
from tagtree.nodes import Element, Node, NodeFunc, el, write_node
from tagtree.writer import StatefulWriter


def doctype(sibling: Any) -> NodeFunc:
    """Render ``<!doctype html>`` followed by ``sibling``, usually ``html(...)``."""

    def _render(writer: StatefulWriter) -> None:
        writer.write("<!doctype html>")
        write_node(writer, sibling)

    return NodeFunc(_render)


def a(*children: Any) -> Element: return el("a", *children)
def abbr(*children: Any) -> Element: return el("abbr", *children)
def address(*children: Any) -> Element: return el("address", *children)
def article(*children: Any) -> Element: return el("article", *children)
def aside(*children: Any) -> Element: return el("aside", *children)
def audio(*children: Any) -> Element: return el("audio", *children)
def b(*children: Any) -> Element: return el("b", *children)
def blockquote(*children: Any) -> Element: return el("blockquote", *children)
def body(*children: Any) -> Element: return el("body", *children)
def button(*children: Any) -> Element: return el("button", *children)
def canvas(*children: Any) -> Element: return el("canvas", *children)
def caption(*children: Any) -> Element: return el("caption", *children)
def cite(*children: Any) -> Element: return el("cite", *children)
def code(*children: Any) -> Element: return el("code", *children)
def colgroup(*children: Any) -> Element: return el("colgroup", *children)
def data_el(*children: Any) -> Element: return el("data", *children)
def datalist(*children: Any) -> Element: return el("datalist", *children)
def dd(*children: Any) -> Element: return el("dd", *children)
def del_(*children: Any) -> Element: return el("del", *children)
def details(*children: Any) -> Element: return el("details", *children)
def dfn(*children: Any) -> Element: return el("dfn", *children)
def dialog(*children: Any) -> Element: return el("dialog", *children)
def div(*children: Any) -> Element: return el("div", *children)
def dl(*children: Any) -> Element: return el("dl", *children)
def dt(*children: Any) -> Element: return el("dt", *children)
def em(*children: Any) -> Element: return el("em", *children)
def fieldset(*children: Any) -> Element: return el("fieldset", *children)
def figcaption(*children: Any) -> Element: return el("figcaption", *children)
def figure(*children: Any) -> Element: return el("figure", *children)
def footer(*children: Any) -> Element: return el("footer", *children)
def form_el(*children: Any) -> Element: return el("form", *children)
def h1(*children: Any) -> Element: return el("h1", *children)
def h2(*children: Any) -> Element: return el("h2", *children)
def h3(*children: Any) -> Element: return el("h3", *children)
def h4(*children: Any) -> Element: return el("h4", *children)
def h5(*children: Any) -> Element: return el("h5", *children)
def h6(*children: Any) -> Element: return el("h6", *children)
def head(*children: Any) -> Element: return el("head", *children)
def header(*children: Any) -> Element: return el("header", *children)
def hgroup(*children: Any) -> Element: return el("hgroup", *children)
def html(*children: Any) -> Element: return el("html", *children)
def i(*children: Any) -> Element: return el("i", *children)
def iframe(*children: Any) -> Element: return el("iframe", *children)
def ins(*children: Any) -> Element: return el("ins", *children)
def kbd(*children: Any) -> Element: return el("kbd", *children)
def label(*children: Any) -> Element: return el("label", *children)
def legend(*children: Any) -> Element: return el("legend", *children)
def li(*children: Any) -> Element: return el("li", *children)
def main(*children: Any) -> Element: return el("main", *children)
def mark(*children: Any) -> Element: return el("mark", *children)
def menu(*children: Any) -> Element: return el("menu", *children)
def meter(*children: Any) -> Element: return el("meter", *children)
def nav(*children: Any) -> Element: return el("nav", *children)
def noscript(*children: Any) -> Element: return el("noscript", *children)
def object_(*children: Any) -> Element: return el("object", *children)
def ol(*children: Any) -> Element: return el("ol", *children)
def optgroup(*children: Any) -> Element: return el("optgroup", *children)
def option(*children: Any) -> Element: return el("option", *children)
def p(*children: Any) -> Element: return el("p", *children)
def picture(*children: Any) -> Element: return el("picture", *children)
def pre(*children: Any) -> Element: return el("pre", *children)
def progress(*children: Any) -> Element: return el("progress", *children)
def q(*children: Any) -> Element: return el("q", *children)
def s(*children: Any) -> Element: return el("s", *children)
def samp(*children: Any) -> Element: return el("samp", *children)
def script(*children: Any) -> Element: return el("script", *children)
def section(*children: Any) -> Element: return el("section", *children)
def select(*children: Any) -> Element: return el("select", *children)
def small(*children: Any) -> Element: return el("small", *children)
def span(*children: Any) -> Element: return el("span", *children)
def strong(*children: Any) -> Element: return el("strong", *children)
def style_el(*children: Any) -> Element: return el("style", *children)
def sub(*children: Any) -> Element: return el("sub", *children)
def summary(*children: Any) -> Element: return el("summary", *children)
def sup(*children: Any) -> Element: return el("sup", *children)
def svg(*children: Any) -> Element: return el("svg", *children)
def table(*children: Any) -> Element: return el("table", *children)
def tbody(*children: Any) -> Element: return el("tbody", *children)
def td(*children: Any) -> Element: return el("td", *children)
def template(*children: Any) -> Element: return el("template", *children)
def textarea(*children: Any) -> Element: return el("textarea", *children)
def tfoot(*children: Any) -> Element: return el("tfoot", *children)
def th(*children: Any) -> Element: return el("th", *children)
def thead(*children: Any) -> Element: return el("thead", *children)
def time(*children: Any) -> Element: return el("time", *children)
def title_el(*children: Any) -> Element: return el("title", *children)
def tr(*children: Any) -> Element: return el("tr", *children)
def u(*children: Any) -> Element: return el("u", *children)
def ul(*children: Any) -> Element: return el("ul", *children)
def var(*children: Any) -> Element: return el("var", *children)
def video(*children: Any) -> Element: return el("video", *children)

# Void elements
def area(*children: Any) -> Element: return el("area", *children)
def base(*children: Any) -> Element: return el("base", *children)
def br(*children: Any) -> Element: return el("br", *children)
def col(*children: Any) -> Element: return el("col", *children)
def embed(*children: Any) -> Element: return el("embed", *children)
def hr(*children: Any) -> Element: return el("hr", *children)
def img(*children: Any) -> Element: return el("img", *children)
def input_(*children: Any) -> Element: return el("input", *children)
def link(*children: Any) -> Element: return el("link", *children)
def meta(*children: Any) -> Element: return el("meta", *children)
def param(*children: Any) -> Element: return el("param", *children)
def source(*children: Any) -> Element: return el("source", *children)
def track(*children: Any) -> Element: return el("track", *children)
def wbr(*children: Any) -> Element: return el("wbr", *children)


ELEMENTS: dict[str, Callable[..., Node]] = {
    fn(None).name: fn  # type: ignore[attr-defined]
    for fn in (
        a, abbr, address, article, aside, audio, b, blockquote, body, button,
        canvas, caption, cite, code, colgroup, data_el, datalist, dd, del_,
        details, dfn, dialog, div, dl, dt, em, fieldset, figcaption, figure,
        footer, form_el, h1, h2, h3, h4, h5, h6, head, header, hgroup, html,
        i, iframe, ins, kbd, label, legend, li, main, mark, menu, meter, nav,
        noscript, object_, ol, optgroup, option, p, picture, pre, progress,
        q, s, samp, script, section, select, small, span, strong, style_el,
        sub, summary, sup, svg, table, tbody, td, template, textarea, tfoot,
        th, thead, time, title_el, tr, u, ul, var, video,
        area, base, br, col, embed, hr, img, input_, link, meta, param,
        source, track, wbr,
    )
}


def get_element(name: str) -> Callable[..., Node]:
    """Return the constructor for the HTML element ``name``.

    Raises
    ------
    UnknownElementError
        If ``name`` is not in the catalog.
    """
    try:
        return ELEMENTS[name]
    except KeyError:
        raise UnknownElementError(name) from None


__all__ = [
    "ELEMENTS",
    "doctype",
    "a",
    "abbr",
    "address",
    "article",
    "aside",
    "audio",
    "b",
    "blockquote",
    "body",
    "button",
    "canvas",
    "caption",
    "cite",
    "code",
    "colgroup",
    "data_el",
    "datalist",
    "dd",
    "del_",
    "details",
    "dfn",
    "dialog",
    "div",
    "dl",
    "dt",
    "em",
    "fieldset",
    "figcaption",
    "figure",
    "footer",
    "form_el",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "head",
    "header",
    "hgroup",
    "html",
    "i",
    "iframe",
    "ins",
    "kbd",
    "label",
    "legend",
    "li",
    "main",
    "mark",
    "menu",
    "meter",
    "nav",
    "noscript",
    "object_",
    "ol",
    "optgroup",
    "option",
    "p",
    "picture",
    "pre",
    "progress",
    "q",
    "s",
    "samp",
    "script",
    "section",
    "select",
    "small",
    "span",
    "strong",
    "style_el",
    "sub",
    "summary",
    "sup",
    "svg",
    "table",
    "tbody",
    "td",
    "template",
    "textarea",
    "tfoot",
    "th",
    "thead",
    "time",
    "title_el",
    "tr",
    "u",
    "ul",
    "var",
    "video",
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input_",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
    "get_element",
]

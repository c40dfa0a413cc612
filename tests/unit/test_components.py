"""Unit tests for tagtree.components, tagtree.hx, tagtree.alpine and tagtree.svg."""
from __future__ import annotations

import pytest

from tagtree import alpine, hx, svg
from tagtree.components import classes, html5
from tagtree.html import a, class_, div, href, link, rel, style_el, text
from tagtree.nodes import el, raw


class TestClasses:
    def test_truthy_keys_sorted(self) -> None:
        assert str(classes({"b": True, "a": True, "c": False})) == ' class="a b"'

    def test_all_false_returns_none(self) -> None:
        assert classes({"a": False}) is None

    def test_empty_returns_none(self) -> None:
        assert classes({}) is None

    def test_merges_with_other_classes(self) -> None:
        node = a(class_("nav"), href("/"), classes({"is-active": True}), el("span"))
        assert str(node) == '<a href="/" class="nav is-active"><span></span></a>'

    def test_none_result_renders_nothing(self) -> None:
        assert str(a(classes({"x": False}), text("y"))) == "<a>y</a>"


class TestHtml5:
    def test_minimal_document(self) -> None:
        out = str(html5("Hi"))
        assert out.startswith("<!doctype html><html><head>")
        assert '<meta charset="utf-8">' in out
        assert '<meta name="viewport" content="width=device-width, initial-scale=1">' in out
        assert "<title>Hi</title>" in out
        assert out.endswith("<body></body></html>")

    def test_title_escaped(self) -> None:
        assert "<title>a &amp; b</title>" in str(html5("a & b"))

    def test_language(self) -> None:
        assert str(html5("t", language="en")).startswith('<!doctype html><html lang="en">')

    def test_no_language_attribute_when_empty(self) -> None:
        assert "<html>" in str(html5("t", language=""))

    def test_description(self) -> None:
        out = str(html5("t", description="About"))
        assert '<meta name="description" content="About">' in out

    def test_head_and_body_nodes(self) -> None:
        out = str(
            html5(
                "t",
                head_nodes=[link(rel("stylesheet"), href("/app.css")), style_el(raw("p{}"))],
                body_nodes=[div(text("x"))],
            )
        )
        assert '<link rel="stylesheet" href="/app.css"><style>p{}</style></head>' in out
        assert "<body><div>x</div></body>" in out

    def test_html_attrs(self) -> None:
        assert '<html class="dark">' in str(html5("t", html_attrs=[class_("dark")]))


class TestHx:
    def test_request_attributes(self) -> None:
        assert str(hx.get("/a")) == ' hx-get="/a"'
        assert str(hx.post("/b")) == ' hx-post="/b"'
        assert str(hx.put("/c")) == ' hx-put="/c"'
        assert str(hx.delete("/d")) == ' hx-delete="/d"'
        assert str(hx.patch("/e")) == ' hx-patch="/e"'

    def test_boost(self) -> None:
        assert str(hx.boost()) == ' hx-boost="true"'

    def test_on(self) -> None:
        assert str(hx.on("click", "alert('x')")) == ' hx-on:click="alert(&#39;x&#39;)"'

    def test_push_url_default(self) -> None:
        assert str(hx.push_url()) == ' hx-push-url="true"'

    def test_swap_target_trigger(self) -> None:
        node = div(hx.target("#out"), hx.swap("outerHTML"), hx.trigger("load"))
        assert str(node) == '<div hx-target="#out" hx-swap="outerHTML" hx-trigger="load"></div>'

    def test_misc(self) -> None:
        assert str(hx.select("#a")) == ' hx-select="#a"'
        assert str(hx.select_oob("#b")) == ' hx-select-oob="#b"'
        assert str(hx.swap_oob("true")) == ' hx-swap-oob="true"'
        assert str(hx.vals('{"a": 1}')) == ' hx-vals="{&#34;a&#34;: 1}"'
        assert str(hx.ext("json-enc")) == ' hx-ext="json-enc"'


class TestAlpine:
    def test_data(self) -> None:
        assert str(alpine.data("{ open: false }")) == ' x-data="{ open: false }"'

    def test_init_and_show(self) -> None:
        assert str(alpine.init("load()")) == ' x-init="load()"'
        assert str(alpine.show("open")) == ' x-show="open"'

    def test_on_with_event(self) -> None:
        assert str(alpine.on("click", "open = !open")) == ' x-on:click="open = !open"'

    def test_on_plain(self) -> None:
        assert str(alpine.on("{ click: toggle }")) == ' x-on="{ click: toggle }"'

    def test_bind(self) -> None:
        assert str(alpine.bind("class", "cls")) == ' x-bind:class="cls"'


class TestSvg:
    @pytest.mark.parametrize(
        ("fn", "name"),
        [
            (svg.clip_rule, "clip-rule"),
            (svg.d, "d"),
            (svg.fill, "fill"),
            (svg.fill_rule, "fill-rule"),
            (svg.stroke, "stroke"),
            (svg.stroke_width, "stroke-width"),
            (svg.view_box, "viewBox"),
        ],
    )
    def test_simple_attributes(self, fn, name: str) -> None:
        assert str(el("element", fn("hat"))) == f'<element {name}="hat"></element>'

"""Test that the quickstart API works for tagtree."""
from __future__ import annotations


def test_quickstart_import(expected_version: str) -> None:
    import tagtree

    assert tagtree.__version__ == expected_version
    assert callable(tagtree.el)
    assert callable(tagtree.attr)


def test_quickstart_render_to_bytes() -> None:
    import io

    from tagtree import attr, el, text

    buffer = io.BytesIO()
    el("p", attr("class", "lead"), text("Hello")).render(buffer)
    assert buffer.getvalue() == b'<p class="lead">Hello</p>'


def test_quickstart_str() -> None:
    from tagtree import el, fragment, group, text

    assert str(fragment(text("a"), text("b"))) == "ab"
    assert str(el("span", group([text("a"), text("b")]))) == "<span>ab</span>"


def test_quickstart_render_helpers() -> None:
    from tagtree import el, render_to_bytes, render_to_string

    assert render_to_bytes(el("hr")) == b"<hr>"
    assert render_to_string(el("b")) == "<b></b>"


def test_quickstart_public_names(package_name: str) -> None:
    import importlib

    mod = importlib.import_module(package_name)
    for name in mod.__all__:
        assert hasattr(mod, name), name

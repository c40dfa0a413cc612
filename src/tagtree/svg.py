"""Attribute helpers for inline SVG.

Use them on ``tagtree.html.svg`` and on child shapes built with ``el``::

    svg(view_box("0 0 24 24"), el("path", d("M0 0h24v24H0z"), fill("none")))
"""
from __future__ import annotations

from tagtree.nodes import Attribute, attr


def clip_rule(v: str) -> Attribute: return attr("clip-rule", v)
def d(v: str) -> Attribute: return attr("d", v)
def fill(v: str) -> Attribute: return attr("fill", v)
def fill_rule(v: str) -> Attribute: return attr("fill-rule", v)
def stroke(v: str) -> Attribute: return attr("stroke", v)
def stroke_width(v: str) -> Attribute: return attr("stroke-width", v)
def view_box(v: str) -> Attribute: return attr("viewBox", v)

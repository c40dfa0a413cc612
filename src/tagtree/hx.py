"""Attribute helpers for htmx (https://htmx.org).

Every helper returns a plain attribute named ``hx-<name>``.
"""
from __future__ import annotations

from tagtree.nodes import Attribute, attr


def boost() -> Attribute: return attr("hx-boost", "true")

def get(path: str) -> Attribute: return attr("hx-get", path)
def post(path: str) -> Attribute: return attr("hx-post", path)
def put(path: str) -> Attribute: return attr("hx-put", path)
def delete(path: str) -> Attribute: return attr("hx-delete", path)
def patch(path: str) -> Attribute: return attr("hx-patch", path)


def on(event: str, code: str) -> Attribute:
    """Create an ``hx-on:<event>`` inline handler."""
    return attr("hx-on:" + event, code)


def push_url(value: str = "true") -> Attribute: return attr("hx-push-url", value)
def select(target: str) -> Attribute: return attr("hx-select", target)
def select_oob(target: str) -> Attribute: return attr("hx-select-oob", target)
def swap(how: str) -> Attribute: return attr("hx-swap", how)
def swap_oob(how: str) -> Attribute: return attr("hx-swap-oob", how)
def target(target: str) -> Attribute: return attr("hx-target", target)
def trigger(trigger: str) -> Attribute: return attr("hx-trigger", trigger)
def vals(vals: str) -> Attribute: return attr("hx-vals", vals)
def ext(ext: str) -> Attribute: return attr("hx-ext", ext)

#!/usr/bin/env python3
"""Example: htmx counter served by FastAPI.

Declares routes through ``tagtree.routing.Router`` and uses the same
``Action`` objects to build the ``hx-*`` attributes that call them.

Usage:
    python examples/03_server.py

Requirements:
    pip install tagtree uvicorn
"""
from __future__ import annotations

from fastapi import FastAPI, Request

from tagtree import Node, hx
from tagtree.components import html5
from tagtree.html import button, div, id_, script, span, src, text
from tagtree.routing import Router

app = FastAPI()
router = Router(app)
counter = router.group("/counter")

_state = {"count": 0}

increment = counter.post("/increment")
reset = counter.post("/reset")


def count_view() -> Node:
    return span(id_("count"), text(str(_state["count"])))


@router.get("/").handle
def index(request: Request) -> Node:
    return html5(
        "Counter",
        language="en",
        head_nodes=[script(src("https://unpkg.com/htmx.org@1.9.12"))],
        body_nodes=[
            div(
                count_view(),
                button(increment.hx(), hx.target("#count"), hx.swap("outerHTML"), text("+1")),
                button(reset.hx(), hx.target("#count"), hx.swap("outerHTML"), text("reset")),
            )
        ],
    )


@increment.handle
def do_increment(request: Request) -> Node:
    _state["count"] += 1
    return count_view()


@reset.handle
def do_reset(request: Request) -> Node:
    _state["count"] = 0
    return count_view()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="localhost", port=8080)

"""Unit tests for tagtree.routing — Router and Action on FastAPI."""
from __future__ import annotations

import asyncio
import threading

import httpx
import pytest
from fastapi import APIRouter, FastAPI, Request
from fastapi.testclient import TestClient

from tagtree.errors import ConstructionError, UnknownMethodError
from tagtree.nodes import NodeFunc, el, text
from tagtree.routing import Router


class TestRouter:
    def setup_method(self) -> None:
        self.app = FastAPI()
        self.router = Router(self.app)

    def test_app_property(self) -> None:
        assert self.router.app is self.app

    def test_default_app_created(self) -> None:
        assert isinstance(Router().app, FastAPI)

    def test_app_property_on_api_router_raises(self) -> None:
        with pytest.raises(ConstructionError):
            Router(APIRouter()).app

    def test_group_prefixes_accumulate(self) -> None:
        nested = self.router.group("/api").group("/v1")
        assert nested.prefix == "/api/v1"
        assert self.router.prefix == ""

    def test_action_methods(self) -> None:
        assert self.router.get("/a").method == "GET"
        assert self.router.post("/a").method == "POST"
        assert self.router.put("/a").method == "PUT"
        assert self.router.delete("/a").method == "DELETE"
        assert self.router.patch("/a").method == "PATCH"

    def test_method_is_upper_cased(self) -> None:
        assert self.router.action("get", "/x").method == "GET"

    def test_full_path_and_hx(self) -> None:
        action = self.router.group("/todos").post("/add")
        assert action.full_path == "/todos/add"
        assert str(action.hx()) == ' hx-post="/todos/add"'

    def test_repr(self) -> None:
        assert repr(self.router.get("/x")) == "Action(GET /x)"

    def test_unknown_method_raises(self) -> None:
        action = self.router.action("TRACE", "/x")
        with pytest.raises(UnknownMethodError):
            action.handle(lambda request: None)


class TestHandlers:
    def setup_method(self) -> None:
        self.app = FastAPI()
        self.router = Router(self.app)
        self.client = TestClient(self.app)

    def test_get_renders_node(self) -> None:
        @self.router.get("/hello").handle
        def hello(request: Request):
            return el("p", text(request.query_params.get("name", "world")))

        response = self.client.get("/hello", params={"name": "<Ada>"})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert response.text == "<p>&lt;Ada&gt;</p>"

    def test_handle_returns_handler(self) -> None:
        def page(request: Request):
            return el("div")

        assert self.router.get("/").handle(page) is page

    def test_async_handler(self) -> None:
        async def page(request: Request):
            return el("main", text("async"))

        self.router.get("/async").handle(page)
        assert self.client.get("/async").text == "<main>async</main>"

    def test_none_result_is_empty_ok(self) -> None:
        self.router.delete("/item").handle(lambda request: None)
        response = self.client.delete("/item")
        assert response.status_code == 200
        assert response.content == b""

    def test_group_route_registered_with_prefix(self) -> None:
        todos = self.router.group("/todos")
        todos.post("/add").handle(lambda request: el("li", text("new")))
        assert self.client.post("/todos/add").text == "<li>new</li>"
        assert self.client.post("/add").status_code == 404

    def test_method_mismatch_not_allowed(self) -> None:
        self.router.post("/only-post").handle(lambda request: el("p"))
        assert self.client.get("/only-post").status_code == 405

    def test_render_error_fails_request(self) -> None:
        def _fail(sink: object) -> None:
            raise OSError("sink gone")

        self.router.get("/broken").handle(lambda request: NodeFunc(_fail))
        client = TestClient(self.app, raise_server_exceptions=False)
        assert client.get("/broken").status_code == 500

    def test_render_error_propagates(self) -> None:
        def _fail(sink: object) -> None:
            raise OSError("sink gone")

        self.router.get("/broken").handle(lambda request: NodeFunc(_fail))
        with pytest.raises(OSError, match="sink gone"):
            self.client.get("/broken")

    def test_sync_handlers_run_concurrently(self) -> None:
        # Both requests must be inside the handler at once to pass the barrier.
        barrier = threading.Barrier(2, timeout=5)

        def slow(request: Request):
            barrier.wait()
            return el("p", text("done"))

        self.router.get("/slow").handle(slow)

        async def _fetch_twice():
            transport = httpx.ASGITransport(app=self.app)
            async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
                return await asyncio.gather(client.get("/slow"), client.get("/slow"))

        responses = asyncio.run(_fetch_twice())
        assert [r.text for r in responses] == ["<p>done</p>", "<p>done</p>"]

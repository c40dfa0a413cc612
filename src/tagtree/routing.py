"""Route HTTP requests to handlers that return node trees.

``Router`` wraps a FastAPI application (or ``APIRouter``).  Declaring a
route returns an ``Action`` that knows its method and full path, so the
same object registers the handler and produces the matching htmx
attribute for the markup that calls it::

    from fastapi import FastAPI, Request
    from tagtree.html import button, div, text
    from tagtree.routing import Router

    router = Router(FastAPI())
    todos = router.group("/todos")

    add = todos.post("/add")

    @add.handle
    def add_todo(request: Request):
        return div(text("added"))

    button(add.hx(), text("Add"))   # <button hx-post="/todos/add">Add</button>

Handlers may be plain or ``async`` functions taking the request;
plain ones run in the FastAPI threadpool.  A returned node is rendered
into the response body as ``text/html``; ``None`` produces an empty
response.
"""
from __future__ import annotations

import inspect
import io
import logging
from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, Response

from tagtree.errors import ConstructionError, UnknownMethodError
from tagtree.nodes import Attribute, attr

logger = logging.getLogger(__name__)

SUPPORTED_METHODS: frozenset[str] = frozenset({"GET", "POST", "PUT", "DELETE", "PATCH"})

Handler = Callable[[Request], Any]


class Router:
    """Declares routes on a FastAPI application under a prefix chain.

    Parameters
    ----------
    app:
        The application or ``APIRouter`` routes are added to.  A new
        ``FastAPI`` application is created when omitted.
    prefixes:
        Path prefixes inherited from parent groups.
    """

    def __init__(
        self,
        app: FastAPI | APIRouter | None = None,
        prefixes: tuple[str, ...] = (),
    ) -> None:
        self._app = app if app is not None else FastAPI()
        self._prefixes = prefixes

    @property
    def app(self) -> FastAPI:
        """The wrapped FastAPI application.

        Raises
        ------
        ConstructionError
            If this router wraps an ``APIRouter`` rather than an application.
        """
        if isinstance(self._app, FastAPI):
            return self._app
        raise ConstructionError("Cannot get the application from a router built on an APIRouter.")

    @property
    def prefix(self) -> str:
        """Concatenation of all group prefixes."""
        return "".join(self._prefixes)

    def group(self, prefix: str) -> "Router":
        """Return a router whose routes live under ``prefix``."""
        return Router(self._app, (*self._prefixes, prefix))

    # ------------------------------------------------------------------
    # Route declaration
    # ------------------------------------------------------------------

    def action(self, method: str, path: str) -> "Action":
        """Declare a route; the handler is attached with ``Action.handle``."""
        return Action(method=method.upper(), path=path, router=self)

    def get(self, path: str) -> "Action":
        return self.action("GET", path)

    def post(self, path: str) -> "Action":
        return self.action("POST", path)

    def put(self, path: str) -> "Action":
        return self.action("PUT", path)

    def delete(self, path: str) -> "Action":
        return self.action("DELETE", path)

    def patch(self, path: str) -> "Action":
        return self.action("PATCH", path)

    def _add_route(self, path: str, endpoint: Callable[..., Any], method: str) -> None:
        self._app.add_api_route(path, endpoint, methods=[method], response_class=HTMLResponse)


class Action:
    """A method/path pair bound to a router."""

    def __init__(self, method: str, path: str, router: Router) -> None:
        self.method = method
        self.path = path
        self._router = router

    def __repr__(self) -> str:
        return f"Action({self.method} {self.full_path})"

    @property
    def full_path(self) -> str:
        """The path including every group prefix."""
        return self._router.prefix + self.path

    def handle(self, handler: Handler) -> Handler:
        """Register ``handler`` for this route and return it unchanged.

        Usable as a decorator.

        Raises
        ------
        UnknownMethodError
            If the action's method is not one of ``SUPPORTED_METHODS``.
        """
        if self.method not in SUPPORTED_METHODS:
            raise UnknownMethodError(self.method)

        action = self

        async def endpoint(request: Request):  # noqa: ANN202
            if inspect.iscoroutinefunction(handler):
                result = await handler(request)
            else:
                result = await run_in_threadpool(handler, request)
            if result is None:
                return Response(status_code=200)
            buffer = io.BytesIO()
            try:
                result.render(buffer)
            except OSError as exc:
                logger.warning("Rendering %r failed: %s", action, exc)
                raise
            return HTMLResponse(buffer.getvalue())

        endpoint.__name__ = getattr(handler, "__name__", "endpoint")
        self._router._add_route(self.full_path, endpoint, self.method)
        logger.debug("Registered %s %s -> %s", self.method, self.full_path, endpoint.__name__)
        return handler

    def hx(self) -> Attribute:
        """Return the ``hx-<method>`` attribute that requests this route."""
        return attr("hx-" + self.method.lower(), self.full_path)


__all__ = ["Action", "Router", "SUPPORTED_METHODS"]

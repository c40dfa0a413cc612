"""Exception types raised by tagtree.

Two families exist:

``ConstructionError``
    Programmer misuse: building an attribute with several values,
    rendering a ``Group`` directly, asking the catalog for an element it
    does not know, or registering a route for an unsupported method.
    The engine never catches these.
``TreeFormatError``
    A serialized tree description (dict, JSON or YAML) that cannot be
    turned back into nodes.

Sink I/O failures are not wrapped: the ``OSError`` raised by the sink is
re-raised unchanged from the top-level ``render`` call.
"""
from __future__ import annotations


class TagTreeError(Exception):
    """Base class for every error raised by tagtree itself."""


class ConstructionError(TagTreeError):
    """A node tree was built or used in a way that is never valid."""


class AttributeArityError(ConstructionError, TypeError):
    """Raised when ``attr`` receives more than one value."""

    def __init__(self, name: str, count: int) -> None:
        self.attribute_name = name
        self.count = count
        super().__init__(
            f"Attribute {name!r} must be just a name or a name and value pair, "
            f"got {count} values."
        )


class GroupRenderError(ConstructionError):
    """Raised when a ``Group`` is rendered outside of a parent node."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot render a group directly. Pass it as a child of an element, "
            "a fragment or another group."
        )


class UnknownElementError(ConstructionError, KeyError):
    """Raised when the element catalog has no constructor for a tag name."""

    def __init__(self, name: str) -> None:
        self.element_name = name
        super().__init__(
            f"No element constructor named {name!r}. "
            "Use tagtree.el() for custom elements."
        )

    def __str__(self) -> str:
        return str(self.args[0])


class UnknownMethodError(ConstructionError, ValueError):
    """Raised when a route is declared for an unsupported HTTP method."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Invalid method {method!r}.")


class TreeFormatError(TagTreeError, ValueError):
    """Raised when a tree description cannot be converted to or from nodes.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    path:
        Location of the offending entry inside the description, e.g.
        ``"children[2].value"``. Empty for the root.
    """

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        where = f" at {path}" if path else ""
        super().__init__(f"{message}{where}")

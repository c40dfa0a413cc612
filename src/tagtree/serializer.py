"""Tree description serialization for tagtree.

Converts data-only node trees (elements, attributes, text, groups and
fragments) to and from plain dicts, JSON and YAML.  The dict form uses a
``"kind"`` discriminator on every node so that loading is unambiguous::

    {"kind": "Element", "name": "p", "children": [
        {"kind": "Attribute", "name": "class", "value": "lead"},
        {"kind": "Text", "content": "Hello", "escape": true},
    ]}

A bare string among ``children`` is accepted as shorthand for an escaped
text node and ``null`` children are kept as ``None``.  Static snapshots
and render functions hold no description of their content and cannot be
serialized.

Usage
-----
::

    from tagtree.serializer import TreeSerializer

    serializer = TreeSerializer()
    yaml_text = serializer.to_yaml(page)
    page2 = serializer.from_yaml(yaml_text)
    assert str(page) == str(page2)
"""
from __future__ import annotations

import json
import logging
from typing import Any

import yaml

from tagtree.errors import TreeFormatError
from tagtree.nodes import Attribute, Element, Fragment, Group, Text

logger = logging.getLogger(__name__)


class TreeSerializer:
    """Converts between node trees and plain Python dicts."""

    # ------------------------------------------------------------------
    # Serialization (nodes → dict)
    # ------------------------------------------------------------------

    def to_dict(self, node: Any) -> dict[str, Any] | None:
        """Serialize ``node`` to a JSON-compatible dict (``None`` stays ``None``).

        Raises
        ------
        TreeFormatError
            If the tree contains a node that is not pure data.
        """
        return self._node_to_dict(node, "")

    def _node_to_dict(self, node: Any, path: str) -> Any:
        if node is None:
            return None
        if isinstance(node, Element):
            return {
                "kind": "Element",
                "name": node.name,
                "children": self._children_to_list(node.children, path),
            }
        if isinstance(node, Attribute):
            return {"kind": "Attribute", "name": node.name, "value": node.value}
        if isinstance(node, Text):
            return {"kind": "Text", "content": node.content, "escape": node.escape}
        if isinstance(node, Group):
            return {"kind": "Group", "children": self._children_to_list(node.children, path)}
        if isinstance(node, Fragment):
            return {
                "kind": "Fragment",
                "children": self._children_to_list(node.children, path),
            }
        raise TreeFormatError(f"Cannot serialize {type(node).__name__} node", path)

    def _children_to_list(self, children: tuple[Any, ...], path: str) -> list[Any]:
        prefix = f"{path}." if path else ""
        return [
            self._node_to_dict(child, f"{prefix}children[{index}]")
            for index, child in enumerate(children)
        ]

    # ------------------------------------------------------------------
    # Deserialization (dict → nodes)
    # ------------------------------------------------------------------

    def from_dict(self, data: Any) -> Any:
        """Build a node tree from a dict produced by ``to_dict`` or written by hand.

        Raises
        ------
        TreeFormatError
            On an unknown ``kind``, a missing field or a field of the wrong type.
        """
        return self._node_from_dict(data, "")

    def _node_from_dict(self, data: Any, path: str) -> Any:
        if data is None:
            return None
        if isinstance(data, str):
            return Text(content=data)
        if not isinstance(data, dict):
            raise TreeFormatError(
                f"Expected a mapping, string or null, got {type(data).__name__}", path
            )

        kind = data.get("kind")
        if kind == "Element":
            name = self._require_str(data, "name", path)
            if not name:
                raise TreeFormatError("Element name must not be empty", self._join(path, "name"))
            return Element(name=name, children=self._children_from_list(data, path))
        if kind == "Attribute":
            value = data.get("value")
            if value is not None and not isinstance(value, str):
                raise TreeFormatError("Attribute value must be a string or null", self._join(path, "value"))
            return Attribute(name=self._require_str(data, "name", path), value=value)
        if kind == "Text":
            escape = data.get("escape", True)
            if not isinstance(escape, bool):
                raise TreeFormatError("Text escape flag must be a boolean", self._join(path, "escape"))
            return Text(content=self._require_str(data, "content", path), escape=escape)
        if kind == "Group":
            return Group(children=self._children_from_list(data, path))
        if kind == "Fragment":
            return Fragment(children=self._children_from_list(data, path))
        raise TreeFormatError(f"Unknown node kind: {kind!r}", path)

    def _children_from_list(self, data: dict[str, Any], path: str) -> tuple[Any, ...]:
        children = data.get("children", [])
        if not isinstance(children, list):
            raise TreeFormatError("children must be a list", self._join(path, "children"))
        prefix = self._join(path, "children")
        return tuple(
            self._node_from_dict(child, f"{prefix}[{index}]")
            for index, child in enumerate(children)
        )

    def _require_str(self, data: dict[str, Any], key: str, path: str) -> str:
        value = data.get(key)
        if not isinstance(value, str):
            raise TreeFormatError(f"Missing or non-string field {key!r}", self._join(path, key))
        return value

    @staticmethod
    def _join(path: str, key: str) -> str:
        return f"{path}.{key}" if path else key

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, node: Any, indent: int = 2) -> str:
        """Serialize ``node`` to a JSON string."""
        return json.dumps(self.to_dict(node), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> Any:
        """Deserialize a node tree from a JSON string."""
        data = json.loads(text)
        logger.debug("Loaded JSON tree description (%d chars)", len(text))
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, node: Any) -> str:
        """Serialize ``node`` to a YAML string."""
        return yaml.dump(
            self.to_dict(node), default_flow_style=False, allow_unicode=True, sort_keys=False
        )

    def from_yaml(self, text: str) -> Any:
        """Deserialize a node tree from a YAML string."""
        data = yaml.safe_load(text)
        logger.debug("Loaded YAML tree description (%d chars)", len(text))
        return self.from_dict(data)

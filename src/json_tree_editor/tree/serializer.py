"""TreeSerializer: converts a (possibly hand-edited) tree back to a JSON value.

Dispatch is an exhaustive ``match`` over NodeKind:

- OBJECT -> dict, one entry per child keyed by the child's label
- KEY    -> the property's value, unwrapped (never re-nested under the key)
- ARRAY  -> list of serialized children in child order
- VALUE  -> ``parse_scalar(scalar_type, label)``

Recursion is depth-first and read-only: no node is modified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, assert_never

from json_tree_editor.tree.nodes import NodeKind, TreeNode
from json_tree_editor.tree.scalars import parse_scalar

__all__ = ["TreeSerializer"]


@dataclass
class TreeSerializer:
    """Rebuilds a JSON value from a TreeNode tree.

    A KEY node whose value is an object or array serializes to that nested
    value itself, so ``{"a": {"b": 1}}`` round-trips exactly rather than
    becoming ``{"a": {"a": {"b": 1}}}``.

    Leaves are parsed against the scalar type they were built with, not
    re-classified from their current text. Edited text that no longer parses
    comes back as a string.
    """

    def serialize(self, node: TreeNode) -> Any:
        """Convert ``node`` and its subtree to a JSON value."""
        match node.kind:
            case NodeKind.OBJECT:
                return {child.label: self.serialize(child) for child in node.children}
            case NodeKind.KEY:
                return self._serialize_key(node)
            case NodeKind.ARRAY:
                return [self._serialize_element(child) for child in node.children]
            case NodeKind.VALUE:
                return parse_scalar(node.scalar_type, node.label)
            case _:
                assert_never(node.kind)

    def _serialize_key(self, node: TreeNode) -> Any:
        if not node.children:
            return None
        sub = node.children[0]
        if sub.kind == NodeKind.VALUE:
            return parse_scalar(sub.scalar_type, sub.label)
        return self.serialize(sub)

    def _serialize_element(self, node: TreeNode) -> Any:
        # A KEY grafted straight into an array keeps its name as a one-entry object.
        if node.kind == NodeKind.KEY:
            return {node.label: self._serialize_key(node)}
        return self.serialize(node)

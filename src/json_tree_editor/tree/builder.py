"""TreeBuilder: converts any decoded JSON value into a typed TreeNode tree.

Uses recursive dispatch to convert JSON dicts, lists, and scalar values into
a tree of TreeNode objects:

- dict   -> OBJECT node with one KEY child per property, each KEY holding the
            property's value subtree as its single child
- list   -> ARRAY node with the element subtrees as direct children
- scalar -> VALUE leaf tagged via ``classify``
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_tree_editor.tree.nodes import NodeKind, TreeNode
from json_tree_editor.tree.scalars import classify

__all__ = ["JsonValue", "TreeBuilder"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


@dataclass
class TreeBuilder:
    """Converts any valid JSON value into a typed TreeNode tree.

    Object properties are emitted in the dict's iteration order, which for the
    stdlib decoder is document order. Nothing is sorted.

    Example::
        builder = TreeBuilder()
        tree = builder.build({"user": {"name": "John"}})
        # tree: OBJECT -> KEY("user") -> OBJECT -> KEY("name") -> VALUE("John")
    """

    def build(self, value: JsonValue) -> TreeNode:
        """Convert a JSON value to a TreeNode tree.

        Args:
            value: Any valid JSON value (dict, list, str, int, float, bool, None).

        Returns:
            A TreeNode tree rooted at the appropriate node kind.

        Raises:
            TypeError: If value (or anything nested in it) is not a JSON type.
        """
        if isinstance(value, dict):
            return self._build_object(value)

        if isinstance(value, list):
            return self._build_array(value)

        scalar_type, label = classify(value)
        return TreeNode(kind=NodeKind.VALUE, label=label, scalar_type=scalar_type)

    def _build_object(self, obj: dict[str, Any]) -> TreeNode:
        object_node = TreeNode(kind=NodeKind.OBJECT)

        for key, val in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be str, got {type(key)!r}")
            key_node = TreeNode(kind=NodeKind.KEY, label=key)
            key_node.children.append(self.build(val))
            object_node.children.append(key_node)

        return object_node

    def _build_array(self, arr: list[Any]) -> TreeNode:
        array_node = TreeNode(kind=NodeKind.ARRAY)
        array_node.children.extend(self.build(item) for item in arr)
        return array_node

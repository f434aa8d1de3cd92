"""Public API functions for json-tree-editor.

Stateless helpers over the tree primitives. Each call uses a fresh
TreeBuilder or TreeSerializer, so no state is carried between calls.
"""

from __future__ import annotations

from typing import Any

from json_tree_editor.codec import decode, encode
from json_tree_editor.config import EditorConfig
from json_tree_editor.tree.builder import JsonValue, TreeBuilder
from json_tree_editor.tree.nodes import TreeNode
from json_tree_editor.tree.serializer import TreeSerializer

__all__ = ["build_tree", "dumps", "loads", "tree_to_json"]


def build_tree(value: JsonValue) -> TreeNode:
    """Return the TreeNode tree for a decoded JSON value."""
    return TreeBuilder().build(value)


def tree_to_json(node: TreeNode) -> Any:
    """Return the JSON value a (possibly edited) tree represents."""
    return TreeSerializer().serialize(node)


def loads(data: bytes | str) -> TreeNode:
    """Decode a JSON document and build its tree.

    Raises:
        EmptyInputError: If ``data`` is blank.
        DecodeError: If ``data`` is not valid JSON.
    """
    return build_tree(decode(data))


def dumps(node: TreeNode, config: EditorConfig | None = None) -> bytes:
    """Serialize a tree and encode it as indented UTF-8 JSON bytes."""
    return encode(tree_to_json(node), config)

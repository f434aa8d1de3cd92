"""Build fragment trees for grafting under an existing node.

A fragment is a JSON value decoded from user-supplied text. It can be merged
as several new siblings (``build_top_level_children``) or attached as one new
subtree (``build_as_new_root``). Both functions are pure; attaching the result
is the caller's job.
"""

from __future__ import annotations

from json_tree_editor.tree.builder import JsonValue, TreeBuilder
from json_tree_editor.tree.nodes import NodeKind, TreeNode

__all__ = ["build_as_new_root", "build_top_level_children"]

_builder = TreeBuilder()


def build_top_level_children(value: JsonValue) -> list[TreeNode]:
    """Return the fragment's top-level nodes as independent siblings.

    Objects yield their KEY nodes, arrays their element subtrees, and a
    scalar yields a single VALUE leaf.
    """
    node = _builder.build(value)
    if node.kind == NodeKind.VALUE:
        return [node]
    return node.children


def build_as_new_root(value: JsonValue) -> TreeNode:
    """Return the whole fragment as a single subtree.

    The wrapper has the fragment's own kind and takes the nodes from
    ``build_top_level_children`` as its children. A scalar fragment is its
    VALUE leaf, since leaves never carry children.
    """
    children = build_top_level_children(value)
    if isinstance(value, dict):
        return TreeNode(kind=NodeKind.OBJECT, children=children)
    if isinstance(value, list):
        return TreeNode(kind=NodeKind.ARRAY, children=children)
    return children[0]

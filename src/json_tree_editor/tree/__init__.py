"""Tree subpackage for JSON <-> tree conversion primitives.

Re-exports the public API for the tree module:
- TreeNode: dataclass representing one row of the editable tree
- NodeKind: StrEnum of the four node kinds (OBJECT, ARRAY, KEY, VALUE)
- ScalarType: StrEnum of the leaf type tags (INT, FLOAT, BOOLEAN, NULL, STRING)
- classify / parse_scalar: scalar <-> (type tag, text) mapping
- TreeBuilder: converts any valid JSON value into a typed TreeNode tree
- build_top_level_children / build_as_new_root: fragment trees for grafting
- TreeSerializer: converts a tree back into a JSON value
- SubstringFilter / walk: case-insensitive label filtering
"""

from json_tree_editor.tree.builder import JsonValue, TreeBuilder
from json_tree_editor.tree.filter import SubstringFilter, walk
from json_tree_editor.tree.grafter import build_as_new_root, build_top_level_children
from json_tree_editor.tree.nodes import NodeKind, ScalarType, TreeNode
from json_tree_editor.tree.scalars import classify, parse_scalar
from json_tree_editor.tree.serializer import TreeSerializer

__all__ = [
    "JsonValue",
    "NodeKind",
    "ScalarType",
    "SubstringFilter",
    "TreeBuilder",
    "TreeNode",
    "TreeSerializer",
    "build_as_new_root",
    "build_top_level_children",
    "classify",
    "parse_scalar",
    "walk",
]

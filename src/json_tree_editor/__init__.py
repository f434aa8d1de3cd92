"""JSON tree editor - an editable, filterable tree view of JSON documents."""

from __future__ import annotations

from json_tree_editor.api import build_tree, dumps, loads, tree_to_json
from json_tree_editor.config import EditorConfig
from json_tree_editor.errors import (
    DecodeError,
    DocumentIOError,
    EmptyInputError,
    EncodeError,
    GraftError,
    JsonTreeError,
)
from json_tree_editor.session import TreeSession
from json_tree_editor.tree import NodeKind, ScalarType, TreeNode

__version__: str = "0.1.0"
__all__: list[str] = [
    "DecodeError",
    "DocumentIOError",
    "EditorConfig",
    "EmptyInputError",
    "EncodeError",
    "GraftError",
    "JsonTreeError",
    "NodeKind",
    "ScalarType",
    "TreeNode",
    "TreeSession",
    "build_tree",
    "dumps",
    "loads",
    "tree_to_json",
]

"""Unit tests for the public API functions: build_tree, tree_to_json, loads, dumps."""

from __future__ import annotations

import json

import pytest

from json_tree_editor import (
    DecodeError,
    EditorConfig,
    EmptyInputError,
    NodeKind,
    TreeNode,
    build_tree,
    dumps,
    loads,
    tree_to_json,
)


class TestBuildTree:
    def test_returns_tree_node(self) -> None:
        tree = build_tree({"a": 1})
        assert isinstance(tree, TreeNode)
        assert tree.kind == NodeKind.OBJECT

    def test_no_global_state_between_calls(self) -> None:
        assert build_tree([1]) == build_tree([1])
        assert build_tree([1]) is not build_tree([1])


class TestTreeToJson:
    def test_round_trip(self) -> None:
        value = {"a": {"b": [1, 2.5, None]}, "c": "d"}
        assert tree_to_json(build_tree(value)) == value


class TestLoads:
    def test_bytes(self) -> None:
        assert tree_to_json(loads(b'{"a": [true]}')) == {"a": [True]}

    def test_empty(self) -> None:
        with pytest.raises(EmptyInputError):
            loads(b"")

    def test_invalid(self) -> None:
        with pytest.raises(DecodeError):
            loads("{invalid")


class TestDumps:
    def test_default_indent(self) -> None:
        assert dumps(build_tree({"a": 1})) == b'{\n  "a": 1\n}\n'

    def test_config_passthrough(self) -> None:
        data = dumps(build_tree({"a": 1}), config=EditorConfig(indent=0))
        assert json.loads(data) == {"a": 1}
        assert data == b'{\n"a": 1\n}\n'

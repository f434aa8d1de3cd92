"""Tests for walk() and SubstringFilter.

Covers matching by descent, keeping matched subtrees intact, case
insensitivity, non-cumulative passes, empty results, and that the origin
tree is never modified by filtering.
"""

from __future__ import annotations

import copy

import pytest

from json_tree_editor.tree.builder import TreeBuilder
from json_tree_editor.tree.filter import SubstringFilter, walk
from json_tree_editor.tree.nodes import NodeKind, TreeNode


@pytest.fixture
def origin() -> TreeNode:
    return TreeBuilder().build({"alpha": 1, "beta": {"gamma": 2}})


@pytest.fixture
def subject(origin: TreeNode) -> SubstringFilter:
    return SubstringFilter(origin)


def _labels(nodes: list[TreeNode]) -> list[str]:
    return [node.label for node in nodes]


# ---------------------------------------------------------------------------
# walk
# ---------------------------------------------------------------------------


class TestWalk:
    def test_descends_into_non_matching_nodes(self, origin: TreeNode) -> None:
        assert _labels(walk(origin.children, "gam")) == ["gamma"]

    def test_match_keeps_full_subtree(self, origin: TreeNode) -> None:
        found = walk(origin.children, "beta")
        assert found == [origin.children[1]]
        assert found[0].children[0].children[0].label == "gamma"

    def test_matched_nodes_are_originals(self, origin: TreeNode) -> None:
        gamma = origin.children[1].children[0].children[0]
        assert walk(origin.children, "gam")[0] is gamma

    def test_matches_value_labels(self, origin: TreeNode) -> None:
        found = walk(origin.children, "2")
        assert len(found) == 1
        assert found[0].kind == NodeKind.VALUE

    def test_no_match_is_empty(self, origin: TreeNode) -> None:
        assert walk(origin.children, "zzz") == []

    def test_matches_in_document_order(self) -> None:
        tree = TreeBuilder().build({"b": {"ax": 1}, "ay": 2, "c": ["az"]})
        assert _labels(walk(tree.children, "a")) == ["ax", "ay", "az"]

    def test_label_is_case_folded(self) -> None:
        tree = TreeBuilder().build({"GammaRay": 1})
        assert _labels(walk(tree.children, "gamma")) == ["GammaRay"]


# ---------------------------------------------------------------------------
# SubstringFilter
# ---------------------------------------------------------------------------


class TestSubstringFilter:
    def test_filter_finds_nested_and_omits_others(
        self, subject: SubstringFilter
    ) -> None:
        display = subject.apply("gam")
        assert _labels(display.children) == ["gamma"]

    def test_empty_query_restores_top_level(self, subject: SubstringFilter) -> None:
        subject.apply("gam")
        display = subject.apply("")
        assert _labels(display.children) == ["alpha", "beta"]

    def test_query_is_case_insensitive(self, subject: SubstringFilter) -> None:
        assert _labels(subject.apply("GAM").children) == ["gamma"]

    def test_no_match_is_empty_display(self, subject: SubstringFilter) -> None:
        display = subject.apply("nothing-here")
        assert display.children == []

    def test_not_cumulative(self, subject: SubstringFilter) -> None:
        """Each pass starts over from the origin."""
        subject.apply("gam")
        assert _labels(subject.apply("alp").children) == ["alpha"]

    def test_display_root_mirrors_origin_root(
        self, origin: TreeNode, subject: SubstringFilter
    ) -> None:
        display = subject.apply("gam")
        assert display is not origin
        assert display.kind == origin.kind
        assert display.label == origin.label

    def test_restore_returns_fresh_children_list(
        self, origin: TreeNode, subject: SubstringFilter
    ) -> None:
        display = subject.restore()
        assert display.children == origin.children
        assert display.children is not origin.children


class TestFilterIsNonDestructive:
    def test_origin_unchanged_after_many_filters(
        self, origin: TreeNode, subject: SubstringFilter
    ) -> None:
        pristine = copy.deepcopy(origin)
        for query in ["g", "ga", "gam", "x", "", "BETA", "1", "alpha"]:
            subject.apply(query)
        assert origin == pristine

    def test_reset_matches_origin(
        self, origin: TreeNode, subject: SubstringFilter
    ) -> None:
        for query in ["gam", "zzz", "a"]:
            subject.apply(query)
        assert subject.apply("") == origin

    def test_mutating_display_list_leaves_origin(
        self, origin: TreeNode, subject: SubstringFilter
    ) -> None:
        display = subject.apply("")
        display.children.clear()
        assert _labels(origin.children) == ["alpha", "beta"]

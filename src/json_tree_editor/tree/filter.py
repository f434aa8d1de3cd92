"""Substring filter over a display tree.

Filtering never creates, copies or destroys nodes. It computes a new list of
existing nodes to hang under a fresh display root, always starting from the
unfiltered origin, so each result depends only on the current query.
"""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from json_tree_editor.tree.nodes import TreeNode

__all__ = ["SubstringFilter", "walk"]


def walk(nodes: Iterable[TreeNode], query: str) -> list[TreeNode]:
    """Collect the nodes whose label contains ``query``.

    A matching node is kept with its full subtree attached; nothing inside it
    is filtered. A non-matching node is dropped and its children are searched
    in its place, so deeper matches are spliced up into the result.

    Args:
        nodes: Nodes to search, in display order.
        query: Case-folded search text. Plain substring containment; no
               anchoring and no pattern syntax.
    """
    found: list[TreeNode] = []
    for node in nodes:
        if query in node.label.casefold():
            found.append(node)
        else:
            found.extend(walk(node.children, query))
    return found


class SubstringFilter:
    """Derives filtered display roots from an origin tree.

    The origin is only read. Each display root returned is a new TreeNode
    with the origin root's kind and label and its own children list, so
    changing which children are displayed never touches the origin.
    """

    def __init__(self, origin: TreeNode) -> None:
        self._origin = origin

    @property
    def origin(self) -> TreeNode:
        return self._origin

    def restore(self) -> TreeNode:
        """Return an unfiltered display root over the origin's top level."""
        return self._display_root(list(self._origin.children))

    def apply(self, query: str) -> TreeNode:
        """Return a display root holding the matches for ``query``.

        An empty query restores the full tree. A query that matches nothing
        yields a display root with no children.
        """
        if not query:
            return self.restore()

        folded = query.casefold()
        matches = walk(self._origin.children, folded)
        logger.debug(f"Filter {folded!r} matched {len(matches)} node(s)")
        return self._display_root(matches)

    def _display_root(self, children: list[TreeNode]) -> TreeNode:
        return TreeNode(
            kind=self._origin.kind,
            label=self._origin.label,
            scalar_type=self._origin.scalar_type,
            children=children,
        )

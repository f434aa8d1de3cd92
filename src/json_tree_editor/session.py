"""TreeSession: controller that owns one editable JSON tree.

This is the wiring layer between the tree primitives and a display layer.
It keeps two roots:

- ``origin``: the true, complete tree (the Origin Snapshot). Loads and grafts
  change it; filtering only reads it.
- ``display``: the root currently shown. It is always a separate TreeNode
  whose children list is rebuilt by each filter pass, holding the same child
  node identities as the origin. Editing or grafting under a displayed node
  therefore edits the origin as well.

The "currently selected node" is passed explicitly to each graft call, so
several sessions can coexist without shared state.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from loguru import logger

from json_tree_editor.codec import decode, encode
from json_tree_editor.config import EditorConfig
from json_tree_editor.document import read_document, write_document
from json_tree_editor.errors import EmptyInputError, GraftError
from json_tree_editor.tree.builder import JsonValue, TreeBuilder
from json_tree_editor.tree.filter import SubstringFilter
from json_tree_editor.tree.grafter import build_as_new_root, build_top_level_children
from json_tree_editor.tree.nodes import NodeKind, TreeNode
from json_tree_editor.tree.serializer import TreeSerializer

__all__ = ["TreeSession"]


class TreeSession:
    """One JSON document presented as an editable, filterable tree.

    Every operation either completes or raises a ``JsonTreeError`` subclass
    before touching the tree, so a failed load or graft leaves both roots
    exactly as they were.

    Example::

        session = TreeSession()
        session.load(b'{"alpha": 1, "beta": {"gamma": 2}}')
        session.filter("gam")
        [node.label for node in session.children]   # ["gamma"]
        session.filter("")
        session.to_json()   # {"alpha": 1, "beta": {"gamma": 2}}
    """

    def __init__(self, config: EditorConfig | None = None) -> None:
        self._config: EditorConfig = config if config is not None else EditorConfig()
        self._builder = TreeBuilder()
        self._serializer = TreeSerializer()
        self._query = ""
        self._set_origin(TreeNode(kind=NodeKind.OBJECT))

    # ------------------------------------------------------------------
    # Display-layer surface
    # ------------------------------------------------------------------

    @property
    def config(self) -> EditorConfig:
        return self._config

    @property
    def origin(self) -> TreeNode:
        """The complete, unfiltered tree."""
        return self._origin

    @property
    def root(self) -> TreeNode:
        """The display root currently shown."""
        return self._display

    @property
    def children(self) -> list[TreeNode]:
        """The display root's children, in display order."""
        return self._display.children

    @property
    def query(self) -> str:
        return self._query

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, data: bytes | str) -> TreeNode:
        """Replace the whole tree with the document in ``data``.

        Raises:
            EmptyInputError: If ``data`` is blank.
            DecodeError: If ``data`` is not valid JSON.
        """
        return self.load_value(decode(data))

    def load_value(self, value: JsonValue) -> TreeNode:
        """Replace the whole tree with one built from an already decoded value."""
        root = self._builder.build(value)
        self._query = ""
        self._set_origin(root)
        logger.info(f"Loaded {root.kind} document, {len(root.children)} top node(s)")
        return root

    def load_file(self, path: str | os.PathLike[str]) -> TreeNode:
        """Replace the whole tree with the document stored at ``path``."""
        return self.load(read_document(path, self._config))

    # ------------------------------------------------------------------
    # Grafting
    # ------------------------------------------------------------------

    def add_values(self, text: str, target: TreeNode | None = None) -> list[TreeNode]:
        """Merge a fragment's top-level nodes as new children of ``target``.

        An object fragment adds one KEY per property, an array one node per
        element, a scalar a single VALUE leaf.

        Args:
            text:   JSON fragment text from the display layer.
            target: Selected node; None means the document root.

        Returns:
            The newly attached nodes.
        """
        value = self._decode_fragment(text)
        parent = self._resolve_target(target)
        nodes = build_top_level_children(value)
        if parent.kind == NodeKind.OBJECT:
            stray = [node for node in nodes if node.kind != NodeKind.KEY]
            if stray:
                logger.warning("Rejected graft of unnamed values into an object")
                raise GraftError("only object properties can be added to an object")

        parent.children.extend(nodes)
        self._after_graft(len(nodes))
        return nodes

    def add_node(
        self, text: str, target: TreeNode | None = None, key: str | None = None
    ) -> TreeNode:
        """Attach a whole fragment as exactly one new child of ``target``.

        When the resolved target is an object the subtree is attached under a
        new KEY named ``key``, which is then the node returned.

        Args:
            text:   JSON fragment text from the display layer.
            target: Selected node; None means the document root.
            key:    Property name, required when grafting into an object.

        Returns:
            The newly attached child of the target.
        """
        value = self._decode_fragment(text)
        parent = self._resolve_target(target)
        node = build_as_new_root(value)
        if parent.kind == NodeKind.OBJECT:
            if not key:
                logger.warning("Rejected graft into an object without a key")
                raise GraftError("a key is required to add a node to an object")
            node = TreeNode(kind=NodeKind.KEY, label=key, children=[node])

        parent.children.append(node)
        self._after_graft(1)
        return node

    # ------------------------------------------------------------------
    # Filtering and editing
    # ------------------------------------------------------------------

    def filter(self, query: str) -> TreeNode:
        """Show only the nodes whose label contains ``query`` (case-insensitive).

        An empty query restores the full tree. The result depends only on
        ``query``, never on a previous filter.
        """
        self._query = query
        self._display = self._filter.apply(query)
        return self._display

    def edit(self, node: TreeNode, text: str) -> None:
        """Replace a node's label with hand-edited text.

        The node's kind and scalar type stay as built; a VALUE leaf whose new
        text no longer parses as its type is saved as a string.
        """
        node.label = text

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_json(self) -> Any:
        """Return the complete document (ignoring any active filter)."""
        return self._serializer.serialize(self._origin)

    def dumps(self) -> bytes:
        return encode(self.to_json(), self._config)

    def save(self, path: str | os.PathLike[str]) -> Path:
        """Overwrite ``path`` with the complete document."""
        written = write_document(path, self.dumps(), self._config)
        logger.info(f"Saved document to {written}")
        return written

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _set_origin(self, root: TreeNode) -> None:
        self._origin = root
        self._filter = SubstringFilter(root)
        self._display = self._filter.apply(self._query)

    def _decode_fragment(self, text: str) -> JsonValue:
        if not text:
            logger.warning("Rejected graft of an empty fragment")
            raise EmptyInputError
        return decode(text)

    def _resolve_target(self, target: TreeNode | None) -> TreeNode:
        if target is None or target is self._display:
            parent = self._origin
        elif target.kind == NodeKind.KEY and target.children:
            parent = target.children[0]
        else:
            parent = target

        if parent.kind not in (NodeKind.OBJECT, NodeKind.ARRAY):
            logger.warning(f"Rejected graft under a {parent.kind} node")
            raise GraftError(f"cannot add children to a {parent.kind} node")
        return parent

    def _after_graft(self, count: int) -> None:
        # The origin already holds the new nodes; rebuild the display from it.
        self._display = self._filter.apply(self._query)
        logger.info(f"Grafted {count} node(s)")

"""TreeNode dataclass plus the NodeKind and ScalarType StrEnums.

These are the row-level data types shared by the builder, grafter, filter and
serializer. A node's ``kind`` (and, for leaves, ``scalar_type``) is fixed when
the node is constructed; only ``label`` and ``children`` are editable.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

_IMMUTABLE_FIELDS = frozenset({"kind", "scalar_type"})


class NodeKind(StrEnum):
    """The four structural node kinds of a display tree.

    - OBJECT -> "object" : JSON object {}, children are KEY nodes
    - ARRAY  -> "array"  : JSON array [], children are element subtrees
    - KEY    -> "key"    : one object property, exactly one child
    - VALUE  -> "value"  : a scalar leaf
    """

    OBJECT = auto()
    ARRAY = auto()
    KEY = auto()
    VALUE = auto()


class ScalarType(StrEnum):
    """Type tag of a VALUE leaf, used to parse edited text back to a scalar."""

    INT = auto()
    FLOAT = auto()
    BOOLEAN = auto()
    NULL = auto()
    STRING = auto()


@dataclass(slots=True)
class TreeNode:
    """One row of the editable JSON tree.

    Attributes:
        kind:        Which kind of node this is (see NodeKind). Read-only.
        label:       Property name for KEY nodes; literal text for VALUE nodes;
                     empty string for OBJECT and ARRAY nodes.
        scalar_type: Scalar tag for VALUE nodes, None for every other kind.
                     Read-only.
        children:    Child nodes, owned exclusively by this node.
    """

    kind: NodeKind
    label: str = ""
    scalar_type: ScalarType | None = None
    children: list[TreeNode] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.kind == NodeKind.VALUE and self.scalar_type is None:
            msg = "VALUE nodes require a scalar_type"
            raise ValueError(msg)
        if self.kind != NodeKind.VALUE and self.scalar_type is not None:
            msg = f"{self.kind} nodes cannot carry a scalar_type"
            raise ValueError(msg)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _IMMUTABLE_FIELDS and _is_set(self, name):
            msg = f"TreeNode.{name} cannot be reassigned"
            raise AttributeError(msg)
        object.__setattr__(self, name, value)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def iter_nodes(self) -> Iterator[TreeNode]:
        """Yield this node and all of its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()


def _is_set(node: TreeNode, name: str) -> bool:
    # Unassigned slots raise AttributeError on read.
    try:
        object.__getattribute__(node, name)
    except AttributeError:
        return False
    return True

"""EditorConfig: immutable settings for encoding and document IO.

The tree engine itself has no tunables; these settings only govern how a
serialized tree is written back out and how document paths are resolved.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["EditorConfig"]


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Immutable configuration for a TreeSession.

    Attributes:
        indent: Spaces per indentation level when encoding (>= 0). Default 2.
        sort_keys: Sort object keys when encoding. Default False, which keeps
            the order the properties appear in the tree.
        ensure_ascii: Escape non-ASCII characters when encoding. Default False.
        expand_env: Expand ``$VAR`` and ``~`` in document paths before opening
            them. Default True.
    """

    indent: int = 2
    sort_keys: bool = False
    ensure_ascii: bool = False
    expand_env: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            msg = f"indent must be an int, got {type(self.indent).__name__}"
            raise TypeError(msg)
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)

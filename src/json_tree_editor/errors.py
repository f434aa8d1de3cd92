"""Exception hierarchy for json-tree-editor.

Every error raised in response to a user action derives from
``JsonTreeError``. They are all recoverable: the operation that raised is
aborted and the tree it was working on is left unchanged.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "DecodeError",
    "DocumentIOError",
    "EmptyInputError",
    "EncodeError",
    "GraftError",
    "JsonTreeError",
]


class JsonTreeError(Exception):
    """Base class for all recoverable json-tree-editor errors."""


class EmptyInputError(JsonTreeError, ValueError):
    """The input buffer or form field held no content."""

    def __init__(self, message: str = "empty json") -> None:
        super().__init__(message)


class DecodeError(JsonTreeError, ValueError):
    """The input is not a valid JSON document.

    Attributes:
        lineno: 1-based line of the failure, when the decoder reported one.
        colno:  1-based column of the failure, when the decoder reported one.
    """

    def __init__(
        self, message: str, lineno: int | None = None, colno: int | None = None
    ) -> None:
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno


class EncodeError(JsonTreeError, ValueError):
    """A value in the tree has no JSON encoding."""


class DocumentIOError(JsonTreeError, OSError):
    """A document could not be opened, read or written."""

    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = Path(path)

    def __str__(self) -> str:
        return str(self.args[0])


class GraftError(JsonTreeError, ValueError):
    """A fragment cannot be attached under the selected node."""

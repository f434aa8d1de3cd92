"""Whole-file document IO.

Reads hand a complete buffer to the codec; writes overwrite the target in
full. ``OSError`` is reported as ``DocumentIOError`` carrying the path.
"""

from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

from json_tree_editor.config import EditorConfig
from json_tree_editor.errors import DocumentIOError, EmptyInputError

__all__ = ["read_document", "resolve_path", "write_document"]


def resolve_path(
    path: str | os.PathLike[str], config: EditorConfig | None = None
) -> Path:
    """Return ``path`` as a Path, expanding ``$VAR`` and ``~`` when enabled."""
    cfg = config if config is not None else EditorConfig()
    raw = os.fspath(path)
    if not raw.strip():
        raise EmptyInputError("no file name given")
    if cfg.expand_env:
        raw = os.path.expanduser(os.path.expandvars(raw))
    return Path(raw)


def read_document(
    path: str | os.PathLike[str], config: EditorConfig | None = None
) -> bytes:
    """Read the whole file at ``path``."""
    target = resolve_path(path, config)
    try:
        data = target.read_bytes()
    except OSError as exc:
        logger.warning(f"Can't open file {target}: {exc}")
        raise DocumentIOError(f"can't open file: {exc}", target) from exc
    logger.debug(f"Read {len(data)} bytes from {target}")
    return data


def write_document(
    path: str | os.PathLike[str], data: bytes, config: EditorConfig | None = None
) -> Path:
    """Overwrite the file at ``path`` with ``data`` and return the resolved path."""
    target = resolve_path(path, config)
    try:
        target.write_bytes(data)
    except OSError as exc:
        logger.warning(f"Can't write file {target}: {exc}")
        raise DocumentIOError(f"can't create file: {exc}", target) from exc
    logger.debug(f"Wrote {len(data)} bytes to {target}")
    return target

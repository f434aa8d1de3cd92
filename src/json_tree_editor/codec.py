"""Byte/text <-> JSON value codec.

``decode`` turns a complete in-memory buffer into a JSON value and maps
failures onto ``EmptyInputError`` and ``DecodeError``. ``encode`` writes a
JSON value back out with the configured indentation and reports values that
have no JSON encoding as ``EncodeError``.

Both directions are strict: ``NaN``, ``Infinity`` and ``-Infinity`` are
rejected.
"""

from __future__ import annotations

import json
from typing import Any, NoReturn

from loguru import logger

from json_tree_editor.config import EditorConfig
from json_tree_editor.errors import DecodeError, EmptyInputError, EncodeError

__all__ = ["decode", "encode"]


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"{name} is not valid JSON")


def decode(data: bytes | str) -> Any:
    """Decode one JSON document.

    Args:
        data: The whole document, as bytes (UTF-8/16/32) or text.

    Returns:
        The decoded JSON value.

    Raises:
        EmptyInputError: If ``data`` is empty or whitespace only.
        DecodeError: If ``data`` is not valid JSON or not decodable text.
    """
    if not data.strip():
        logger.warning("Refusing to decode an empty JSON buffer")
        raise EmptyInputError

    try:
        return json.loads(data, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        logger.warning(f"Invalid JSON: {exc}")
        raise DecodeError(str(exc), lineno=exc.lineno, colno=exc.colno) from exc
    except UnicodeDecodeError as exc:
        logger.warning(f"JSON buffer is not valid text: {exc}")
        raise DecodeError(str(exc)) from exc
    except ValueError as exc:
        # non-standard constants, integers past the digit limit
        logger.warning(f"Invalid JSON: {exc}")
        raise DecodeError(str(exc)) from exc


def encode(value: Any, config: EditorConfig | None = None) -> bytes:
    """Encode a JSON value as UTF-8 bytes with a trailing newline.

    Raises:
        EncodeError: If ``value`` holds a non-finite float or an integer too
            long to render.
    """
    cfg = config if config is not None else EditorConfig()
    try:
        text = json.dumps(
            value,
            indent=cfg.indent,
            sort_keys=cfg.sort_keys,
            ensure_ascii=cfg.ensure_ascii,
            allow_nan=False,
        )
    except ValueError as exc:
        logger.warning(f"Can't encode JSON: {exc}")
        raise EncodeError(f"can't marshal json: {exc}") from exc
    return (text + "\n").encode("utf-8")

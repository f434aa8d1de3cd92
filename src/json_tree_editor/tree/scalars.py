"""Scalar classification and parsing for VALUE leaves.

``classify`` maps a decoded JSON scalar to its ``(ScalarType, text)`` pair;
``parse_scalar`` maps the (possibly hand-edited) text back using the type tag
the leaf was built with. Parsing is lenient on purpose: text that no longer
parses as its tagged type is returned unchanged as a string.
"""

from __future__ import annotations

import math
import re
from typing import Any

from loguru import logger

from json_tree_editor.tree.nodes import ScalarType

__all__ = ["classify", "parse_scalar"]

_INT_RE = re.compile(r"[+-]?[0-9]+")

_TRUE_TEXT = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_TEXT = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def classify(value: Any) -> tuple[ScalarType, str]:
    """Return the scalar type tag and literal text for a JSON scalar.

    Args:
        value: A decoded JSON scalar (None, bool, int, float or str).

    Returns:
        ``(scalar_type, text)``. Integral floats are tagged INT and rendered
        without a fractional part (``2.0`` -> ``"2"``).

    Raises:
        TypeError: If ``value`` is not a JSON scalar.
    """
    if value is None:
        return ScalarType.NULL, "null"

    # bool before int: bool subclasses int
    if isinstance(value, bool):
        return ScalarType.BOOLEAN, "true" if value else "false"

    if isinstance(value, int):
        return ScalarType.INT, str(value)

    if isinstance(value, float):
        if math.isfinite(value) and value == math.trunc(value):
            return ScalarType.INT, str(math.trunc(value))
        return ScalarType.FLOAT, repr(value)

    if isinstance(value, str):
        return ScalarType.STRING, value

    raise TypeError(f"Unsupported JSON scalar type: {type(value)!r}")


def parse_scalar(scalar_type: ScalarType | None, text: str) -> Any:
    """Parse leaf text back into a scalar according to its type tag.

    STRING, or any tag without a parser, returns ``text`` unchanged. When the
    text does not parse as the tagged type (for example an INT leaf edited to
    ``"abc"``) the raw text is returned as a string instead of raising.
    """
    if scalar_type == ScalarType.NULL:
        return None

    if scalar_type == ScalarType.INT:
        if _INT_RE.fullmatch(text):
            try:
                return int(text)
            except ValueError:
                # over the interpreter's int string conversion limit
                return _fallback(scalar_type, text)
        return _fallback(scalar_type, text)

    if scalar_type == ScalarType.FLOAT:
        if "_" in text:
            return _fallback(scalar_type, text)
        try:
            result = float(text)
        except ValueError:
            return _fallback(scalar_type, text)
        # inf and nan have no JSON encoding
        if not math.isfinite(result):
            return _fallback(scalar_type, text)
        return result

    if scalar_type == ScalarType.BOOLEAN:
        if text in _TRUE_TEXT:
            return True
        if text in _FALSE_TEXT:
            return False
        return _fallback(scalar_type, text)

    return text


def _fallback(scalar_type: ScalarType, text: str) -> str:
    logger.debug(f"Leaf text {text!r} is not a valid {scalar_type}, kept as string")
    return text

"""Shared fixtures for the json-tree-editor test suite."""

from __future__ import annotations

import sys
from collections.abc import Iterator

import pytest

# CPython's default limit on int <-> str conversion.
DEFAULT_INT_MAX_STR_DIGITS = 4300


@pytest.fixture
def int_digit_limit() -> Iterator[int]:
    """Pin the interpreter's int string conversion limit to its default."""
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(DEFAULT_INT_MAX_STR_DIGITS)
    try:
        yield DEFAULT_INT_MAX_STR_DIGITS
    finally:
        sys.set_int_max_str_digits(previous)

"""Tests for the EditorConfig frozen dataclass."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_tree_editor.config import EditorConfig


class TestEditorConfigDefaults:
    def test_defaults(self) -> None:
        config = EditorConfig()
        assert config.indent == 2
        assert config.sort_keys is False
        assert config.ensure_ascii is False
        assert config.expand_env is True

    def test_zero_indent_allowed(self) -> None:
        assert EditorConfig(indent=0).indent == 0


class TestEditorConfigValidation:
    def test_negative_indent_raises(self) -> None:
        with pytest.raises(ValueError, match="indent must be >= 0"):
            EditorConfig(indent=-1)

    @pytest.mark.parametrize("indent", ["2", 2.0, True])
    def test_non_int_indent_raises(self, indent: object) -> None:
        with pytest.raises(TypeError, match="indent must be an int"):
            EditorConfig(indent=indent)  # type: ignore[arg-type]


class TestEditorConfigImmutable:
    def test_cannot_set_field(self) -> None:
        config = EditorConfig()
        with pytest.raises(FrozenInstanceError):
            config.indent = 4  # type: ignore[misc]

    def test_equality(self) -> None:
        assert EditorConfig(indent=4) == EditorConfig(indent=4)
        assert EditorConfig(indent=4) != EditorConfig()

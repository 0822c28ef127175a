# topmark:header:start
#
#   project      : DiagStyle
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the rendering configuration value (`Config`)."""

from __future__ import annotations

import json
from dataclasses import FrozenInstanceError

import pytest

from diagstyle.config.model import Config, DisplayStyle
from diagstyle.rendering.chars import Chars


def test_defaults() -> None:
    """`Config.default()` carries the documented defaults."""
    config = Config.default()
    assert config.display_style is DisplayStyle.RICH
    assert config.tab_width == 4
    assert config.chars == Chars.box_drawing()
    assert config.start_context_lines == 3
    assert config.end_context_lines == 1
    assert config.before_label_lines == 0
    assert config.after_label_lines == 0
    assert config == Config()


def test_explicit_overrides_are_not_validated() -> None:
    """Fields are accepted as given, including unusually large values."""
    config = Config(display_style=DisplayStyle.SHORT, tab_width=1_000_000, chars=Chars.ascii())
    assert config.display_style is DisplayStyle.SHORT
    assert config.tab_width == 1_000_000
    assert config.chars.snippet_start == "-->"


def test_with_overrides_returns_new_value() -> None:
    """`with_overrides` copies; the original configuration is untouched."""
    base = Config.default()
    changed = base.with_overrides(tab_width=8, after_label_lines=2)
    assert changed.tab_width == 8
    assert changed.after_label_lines == 2
    assert base.tab_width == 4
    assert base.after_label_lines == 0
    assert changed.chars is base.chars


def test_with_overrides_rejects_unknown_field() -> None:
    """Unknown field names are a programming error."""
    with pytest.raises(TypeError):
        Config.default().with_overrides(color="red")


def test_config_is_immutable() -> None:
    """`Config` is a frozen value."""
    config = Config.default()
    with pytest.raises(FrozenInstanceError):
        config.tab_width = 2  # type: ignore[misc]


def test_to_dict_is_json_friendly() -> None:
    """`to_dict()` stringifies enums and nests the glyph set."""
    data = Config(display_style=DisplayStyle.MEDIUM).to_dict()
    assert data["display_style"] == "medium"
    assert data["chars"]["snippet_start"] == "┌─"
    assert json.loads(json.dumps(data, ensure_ascii=False)) == data


def test_display_style_values() -> None:
    """Display styles parse from their lowercase names."""
    assert [d.value for d in DisplayStyle] == ["rich", "medium", "short"]
    assert DisplayStyle("short") is DisplayStyle.SHORT

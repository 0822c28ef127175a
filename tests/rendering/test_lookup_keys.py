# topmark:header:start
#
#   project      : DiagStyle
#   file         : test_lookup_keys.py
#   file_relpath : tests/rendering/test_lookup_keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `Severity` and `LabelStyle` keys used to index the palette."""

from __future__ import annotations

import pytest

from diagstyle.diagnostic.model import LabelStyle, Severity
from diagstyle.rendering.styles import Styles


@pytest.mark.rendering
def test_keys_are_plain_string_enums() -> None:
    """Both key types are bare string enums carrying no extra behavior."""
    assert [s.value for s in Severity] == ["help", "note", "warning", "error", "bug"]
    assert [s.value for s in LabelStyle] == ["primary", "secondary"]
    assert Severity("warning") is Severity.WARNING
    assert not hasattr(Severity.BUG, "rank")


@pytest.mark.rendering
def test_every_key_pair_resolves_in_palette() -> None:
    """Every severity and label style combination has a palette entry."""
    styles = Styles.default()
    for severity in Severity:
        assert styles.header(severity) is not None
        for label_style in LabelStyle:
            assert styles.label(severity, label_style) is not None

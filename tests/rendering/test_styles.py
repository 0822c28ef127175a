# topmark:header:start
#
#   project      : DiagStyle
#   file         : test_styles.py
#   file_relpath : tests/rendering/test_styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the style palette (`Styles`, `ColorSpec`)."""

from __future__ import annotations

import sys
from dataclasses import fields

import pytest

from diagstyle.diagnostic.model import LabelStyle, Severity
from diagstyle.rendering.styles import Color, ColorSpec, Styles, platform_accent

ACCENT_FIELDS = ("line_number", "source_border", "note_bullet")

SEVERITY_COLORS = {
    Severity.BUG: Color.RED,
    Severity.ERROR: Color.RED,
    Severity.WARNING: Color.YELLOW,
    Severity.NOTE: Color.GREEN,
    Severity.HELP: Color.CYAN,
}


@pytest.mark.rendering
@pytest.mark.parametrize("severity", list(Severity))
def test_header_is_bold_intense_severity_color(severity: Severity) -> None:
    """Headers use the severity color, bold and intense."""
    spec = Styles.default().header(severity)
    assert spec == ColorSpec(fg=SEVERITY_COLORS[severity], bold=True, intense=True)


@pytest.mark.rendering
def test_bug_and_error_alias() -> None:
    """Bug and Error share identical specs in every role."""
    styles = Styles.default()
    assert styles.header(Severity.BUG) == styles.header(Severity.ERROR)
    for label_style in LabelStyle:
        assert styles.label(Severity.BUG, label_style) == styles.label(
            Severity.ERROR, label_style
        )


@pytest.mark.rendering
def test_header_message_has_no_color() -> None:
    """The header message is bold and intense without a foreground color."""
    assert Styles.default().header_message == ColorSpec(bold=True, intense=True)


@pytest.mark.rendering
def test_secondary_label_is_constant_across_severities() -> None:
    """Secondary labels ignore the severity."""
    styles = Styles.default()
    specs = {styles.label(sev, LabelStyle.SECONDARY) for sev in Severity}
    assert specs == {styles.secondary_label}


@pytest.mark.rendering
@pytest.mark.parametrize("severity", list(Severity))
def test_primary_label_shares_hue_without_decoration(severity: Severity) -> None:
    """Primary labels share the header's hue but drop bold and intense."""
    styles = Styles.default()
    label = styles.label(severity, LabelStyle.PRIMARY)
    header = styles.header(severity)
    assert label.fg == header.fg
    assert not label.bold
    assert not label.intense
    assert header.bold and header.intense


@pytest.mark.rendering
def test_primary_labels_differ_by_severity() -> None:
    """Each non-aliased severity yields its own primary label spec."""
    styles = Styles.default()
    specs = {
        sev: styles.label(sev, LabelStyle.PRIMARY)
        for sev in (Severity.ERROR, Severity.WARNING, Severity.NOTE, Severity.HELP)
    }
    assert len(set(specs.values())) == 4


@pytest.mark.rendering
def test_accent_specs_are_equal() -> None:
    """Line numbers, source borders and note bullets share one spec."""
    styles = Styles.default()
    assert styles.line_number == styles.source_border == styles.note_bullet


@pytest.mark.rendering
@pytest.mark.parametrize("accent", list(Color))
def test_with_accent_sets_all_accent_roles(accent: Color) -> None:
    """`with_accent(X)` makes X the color of all three accent roles."""
    styles = Styles.with_accent(accent)
    for name in ACCENT_FIELDS:
        assert getattr(styles, name) == ColorSpec(fg=accent)


@pytest.mark.rendering
def test_changing_accent_only_changes_accent_driven_roles() -> None:
    """Switching the accent changes the accent roles and the secondary label, nothing else."""
    a = Styles.with_accent(Color.MAGENTA)
    b = Styles.with_accent(Color.WHITE)
    changed = {f.name for f in fields(Styles) if getattr(a, f.name) != getattr(b, f.name)}
    assert changed == {*ACCENT_FIELDS, "secondary_label"}


@pytest.mark.rendering
def test_accent_fields_are_distinct_objects() -> None:
    """Accent specs are equal by value, not one shared object."""
    styles = Styles.with_accent(Color.GREEN)
    assert styles.line_number is not styles.source_border
    assert styles.source_border is not styles.note_bullet


@pytest.mark.rendering
@pytest.mark.parametrize(
    ("platform", "expected"),
    [
        ("win32", Color.CYAN),
        ("linux", Color.BLUE),
        ("darwin", Color.BLUE),
        ("cygwin", Color.BLUE),
    ],
)
def test_platform_accent(platform: str, expected: Color) -> None:
    """Windows substitutes cyan for blue; every other platform keeps blue."""
    assert platform_accent(platform) is expected


@pytest.mark.rendering
@pytest.mark.parametrize(("platform", "expected"), [("win32", Color.CYAN), ("linux", Color.BLUE)])
def test_default_uses_platform_accent(
    monkeypatch: pytest.MonkeyPatch, platform: str, expected: Color
) -> None:
    """`Styles.default()` equals `with_accent` of the running platform's accent."""
    monkeypatch.setattr(sys, "platform", platform)
    styles = Styles.default()
    assert styles == Styles.with_accent(expected)
    assert styles.line_number.fg is expected


@pytest.mark.rendering
def test_color_spec_describe() -> None:
    """`describe()` renders a compact, stable form."""
    assert ColorSpec(fg=Color.RED, bold=True, intense=True).describe() == "fg:red bold intense"
    assert ColorSpec(bg=Color.WHITE, underline=True).describe() == "bg:white underline"
    assert ColorSpec().describe() == "none"
    assert ColorSpec().is_none()
    assert not ColorSpec(italic=True).is_none()

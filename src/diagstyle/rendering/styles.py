# topmark:header:start
#
#   project      : DiagStyle
#   file         : styles.py
#   file_relpath : src/diagstyle/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color palette for diagnostics.

This module maps diagnostic roles to abstract style specs, independently of
any terminal backend.

Key types:
    - `Color`: the closed set of terminal colors a spec may use.
    - `ColorSpec`: an immutable color/decoration description (foreground,
      background, bold, intense, ...).
    - `Styles`: the palette. One spec per header severity, one per primary
      label severity, a shared secondary label spec, and three *accent* specs
      (line numbers, source borders, note bullets).

The process-wide default palette is available through `default_styles()`; it
is built once, on first access, and shared read-only afterwards.

Design:
    Severity colors are fixed constants (Bug/Error → red, Warning → yellow,
    Note → green, Help → cyan). The accent color is the only free parameter of
    a palette; see `Styles.with_accent`. Bug and Error deliberately share the
    same specs in every role.
"""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Final

from diagstyle.config.logging import get_logger
from diagstyle.diagnostic.model import LabelStyle, Severity

if TYPE_CHECKING:
    from diagstyle.config.logging import DiagStyleLogger


logger: DiagStyleLogger = get_logger(__name__)


class Color(str, Enum):
    """Terminal colors available to a `ColorSpec`."""

    BLACK = "black"
    BLUE = "blue"
    GREEN = "green"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    YELLOW = "yellow"
    WHITE = "white"


@dataclass(frozen=True)
class ColorSpec:
    """Abstract color and decoration description.

    Attributes:
        fg: Foreground color, or None to keep the terminal default.
        bg: Background color, or None to keep the terminal default.
        bold: Render text in bold.
        intense: Use the bright variant of `fg` and `bg`.
        underline: Underline text.
        dimmed: Render text dimmed.
        italic: Render text in italics.
    """

    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False
    intense: bool = False
    underline: bool = False
    dimmed: bool = False
    italic: bool = False

    def with_fg(self, color: Color | None) -> ColorSpec:
        """Return a copy of this spec with the foreground color replaced."""
        return replace(self, fg=color)

    def is_none(self) -> bool:
        """Return True if this spec changes nothing about the output."""
        return self == _EMPTY_SPEC

    def describe(self) -> str:
        """Return a compact textual form such as ``"fg:red bold intense"``."""
        parts: list[str] = []
        if self.fg is not None:
            parts.append(f"fg:{self.fg.value}")
        if self.bg is not None:
            parts.append(f"bg:{self.bg.value}")
        for flag in ("bold", "intense", "underline", "dimmed", "italic"):
            if getattr(self, flag):
                parts.append(flag)
        return " ".join(parts) or "none"


_EMPTY_SPEC: Final[ColorSpec] = ColorSpec()

# Blue is really difficult to see on the standard Windows console background.
DEFAULT_ACCENT: Final[Color] = Color.BLUE
WINDOWS_ACCENT: Final[Color] = Color.CYAN


def platform_accent(platform: str | None = None) -> Color:
    """Return the accent color for a platform family.

    Args:
        platform (str | None): A `sys.platform` value. Defaults to the running
            interpreter's platform.

    Returns:
        Color: `Color.CYAN` on Windows, `Color.BLUE` everywhere else.
    """
    platform = sys.platform if platform is None else platform
    return WINDOWS_ACCENT if platform == "win32" else DEFAULT_ACCENT


@dataclass(frozen=True)
class Styles:
    """Styles to use when rendering a diagnostic.

    Attributes:
        header_bug: Bug headers. Defaults to ``fg:red bold intense``.
        header_error: Error headers. Defaults to ``fg:red bold intense``.
        header_warning: Warning headers. Defaults to ``fg:yellow bold intense``.
        header_note: Note headers. Defaults to ``fg:green bold intense``.
        header_help: Help headers. Defaults to ``fg:cyan bold intense``.
        header_message: The main diagnostic message. Defaults to ``bold intense``.
        primary_label_bug: Bug labels. Defaults to ``fg:red``.
        primary_label_error: Error labels. Defaults to ``fg:red``.
        primary_label_warning: Warning labels. Defaults to ``fg:yellow``.
        primary_label_note: Note labels. Defaults to ``fg:green``.
        primary_label_help: Help labels. Defaults to ``fg:cyan``.
        secondary_label: Secondary labels. Defaults to ``fg:blue`` (``fg:cyan`` on Windows).
        line_number: Line numbers. Defaults to ``fg:blue`` (``fg:cyan`` on Windows).
        source_border: Source code borders. Defaults to ``fg:blue`` (``fg:cyan`` on Windows).
        note_bullet: Note bullets. Defaults to ``fg:blue`` (``fg:cyan`` on Windows).
    """

    header_bug: ColorSpec
    header_error: ColorSpec
    header_warning: ColorSpec
    header_note: ColorSpec
    header_help: ColorSpec
    header_message: ColorSpec

    primary_label_bug: ColorSpec
    primary_label_error: ColorSpec
    primary_label_warning: ColorSpec
    primary_label_note: ColorSpec
    primary_label_help: ColorSpec
    secondary_label: ColorSpec

    line_number: ColorSpec
    source_border: ColorSpec
    note_bullet: ColorSpec

    @classmethod
    def default(cls) -> Styles:
        """Return the default palette for the running platform."""
        return cls.with_accent(platform_accent())

    @classmethod
    def with_accent(cls, accent: Color) -> Styles:
        """Build a complete palette around one accent color.

        The accent colors secondary labels, line numbers, source borders and
        note bullets. Severity colors are fixed.

        Args:
            accent (Color): The accent color.

        Returns:
            Styles: A new palette.
        """
        header = ColorSpec(bold=True, intense=True)

        return cls(
            header_bug=header.with_fg(Color.RED),
            header_error=header.with_fg(Color.RED),
            header_warning=header.with_fg(Color.YELLOW),
            header_note=header.with_fg(Color.GREEN),
            header_help=header.with_fg(Color.CYAN),
            header_message=header,
            primary_label_bug=ColorSpec(fg=Color.RED),
            primary_label_error=ColorSpec(fg=Color.RED),
            primary_label_warning=ColorSpec(fg=Color.YELLOW),
            primary_label_note=ColorSpec(fg=Color.GREEN),
            primary_label_help=ColorSpec(fg=Color.CYAN),
            secondary_label=ColorSpec(fg=accent),
            line_number=ColorSpec(fg=accent),
            source_border=ColorSpec(fg=accent),
            note_bullet=ColorSpec(fg=accent),
        )

    def header(self, severity: Severity) -> ColorSpec:
        """Return the style used to mark a header at a given severity."""
        return {
            Severity.BUG: self.header_bug,
            Severity.ERROR: self.header_error,
            Severity.WARNING: self.header_warning,
            Severity.NOTE: self.header_note,
            Severity.HELP: self.header_help,
        }[severity]

    def label(self, severity: Severity, label_style: LabelStyle) -> ColorSpec:
        """Return the style used to mark a primary or secondary label at a given severity.

        Secondary labels share one style whatever the severity.
        """
        if label_style is LabelStyle.SECONDARY:
            return self.secondary_label
        return {
            Severity.BUG: self.primary_label_bug,
            Severity.ERROR: self.primary_label_error,
            Severity.WARNING: self.primary_label_warning,
            Severity.NOTE: self.primary_label_note,
            Severity.HELP: self.primary_label_help,
        }[severity]


_default_styles: Styles | None = None
_default_lock = threading.Lock()


def default_styles() -> Styles:
    """Return the process-wide default palette.

    The palette is built with `Styles.default()` on first access. Concurrent
    first callers block on a lock, so construction happens exactly once and
    every caller receives the same instance.

    Returns:
        Styles: The shared, read-only default palette.
    """
    global _default_styles
    styles = _default_styles
    if styles is not None:
        return styles
    with _default_lock:
        if _default_styles is None:
            _default_styles = Styles.default()
            logger.debug(
                "Built process-wide default styles (accent=%s)",
                _default_styles.line_number.fg,
            )
        return _default_styles

# topmark:header:start
#
#   project      : DiagStyle
#   file         : __init__.py
#   file_relpath : src/diagstyle/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Glyphs, colors and style writers for diagnostic rendering.

Design:
    - `Chars` holds the glyphs a renderer draws with.
    - `Styles` maps severities and label roles to `ColorSpec` values.
    - `StylesWriter` applies those specs to any `WriteColor` sink by role.
    - `default_styles()` returns the shared process-wide palette.
"""

from __future__ import annotations

from diagstyle.rendering.chars import Chars
from diagstyle.rendering.sinks import AnsiWriter, BufferWriter, NoColorWriter, make_writer
from diagstyle.rendering.styles import (
    Color,
    ColorSpec,
    Styles,
    default_styles,
    platform_accent,
)
from diagstyle.rendering.writer import StylesWriter, WriteColor, WriteStyle

__all__ = [
    "AnsiWriter",
    "BufferWriter",
    "Chars",
    "Color",
    "ColorSpec",
    "NoColorWriter",
    "Styles",
    "StylesWriter",
    "WriteColor",
    "WriteStyle",
    "default_styles",
    "make_writer",
    "platform_accent",
]

# topmark:header:start
#
#   project      : DiagStyle
#   file         : __init__.py
#   file_relpath : src/diagstyle/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagStyle package.

DiagStyle is the style and configuration layer of a diagnostic renderer. It
decides which colors and which glyphs are used to present source-anchored
diagnostics on a terminal, and exposes a small CLI to inspect them.
"""

from __future__ import annotations

from diagstyle.config.model import Config, DisplayStyle
from diagstyle.diagnostic.model import LabelStyle, Severity
from diagstyle.rendering.chars import Chars
from diagstyle.rendering.styles import Color, ColorSpec, Styles, default_styles
from diagstyle.rendering.writer import StylesWriter

__all__ = [
    "Chars",
    "Color",
    "ColorSpec",
    "Config",
    "DisplayStyle",
    "LabelStyle",
    "Severity",
    "Styles",
    "StylesWriter",
    "default_styles",
]

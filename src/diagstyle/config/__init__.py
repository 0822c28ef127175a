# topmark:header:start
#
#   project      : DiagStyle
#   file         : __init__.py
#   file_relpath : src/diagstyle/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering configuration and logging setup for DiagStyle."""

from __future__ import annotations

from diagstyle.config.model import Config, DisplayStyle

__all__ = [
    "Config",
    "DisplayStyle",
]

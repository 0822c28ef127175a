# topmark:header:start
#
#   project      : DiagStyle
#   file         : model.py
#   file_relpath : src/diagstyle/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering configuration for diagnostics.

`Config` is an immutable value describing *how much* to render (display style,
context lines) and *with which glyphs*. It is built once, typically from
defaults, and passed by reference into rendering calls.

No field is validated: an unusually large `tab_width` or context-line count is
accepted as-is, and handling extreme values is left to the layout code that
consumes the configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from diagstyle.rendering.chars import Chars


class DisplayStyle(str, Enum):
    """The display style to use when rendering diagnostics.

    Members:
        RICH: A richly formatted diagnostic, with source code previews.
        MEDIUM: A condensed diagnostic, with a line number, severity, message
            and notes (if any).
        SHORT: A short diagnostic, with a line number, severity, and message.

    Example (``MEDIUM``):
        ```text
        test:2:9: error[E0001]: unexpected type in `+` application
        = expected type `Int`
             found type `String`
        ```

    Example (``SHORT``):
        ```text
        test:2:9: error[E0001]: unexpected type in `+` application
        ```
    """

    RICH = "rich"
    MEDIUM = "medium"
    SHORT = "short"


@dataclass(frozen=True)
class Config:
    """Configures how a diagnostic is rendered.

    Attributes:
        display_style: The display style to use. Defaults to `DisplayStyle.RICH`.
        tab_width: Column width of tabs. Defaults to `4`.
        chars: Characters to use when rendering. Defaults to `Chars.box_drawing()`.
        start_context_lines: Minimum number of lines shown after the line on which
            a multi-line label begins. Defaults to `3`.
        end_context_lines: Minimum number of lines shown before the line on which
            a multi-line label ends. Defaults to `1`.
        before_label_lines: Minimum number of lines before a label included for
            context. Defaults to `0`.
        after_label_lines: Minimum number of lines after a label included for
            context. Defaults to `0`.
    """

    display_style: DisplayStyle = DisplayStyle.RICH
    tab_width: int = 4
    chars: Chars = field(default_factory=Chars.default)
    start_context_lines: int = 3
    end_context_lines: int = 1
    before_label_lines: int = 0
    after_label_lines: int = 0

    @classmethod
    def default(cls) -> Config:
        """Return a configuration with every field at its default."""
        return cls()

    def with_overrides(self, **changes: Any) -> Config:
        """Return a copy of this configuration with the given fields replaced.

        Args:
            **changes (Any): Field names mapped to their new values.

        Returns:
            Config: A new configuration; `self` is left untouched.

        Raises:
            TypeError: If a key does not name a `Config` field.
        """
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this configuration.

        Enum members are rendered as their string values and the glyph set is
        nested under ``"chars"``.
        """
        return {
            "display_style": self.display_style.value,
            "tab_width": self.tab_width,
            "chars": self.chars.to_dict(),
            "start_context_lines": self.start_context_lines,
            "end_context_lines": self.end_context_lines,
            "before_label_lines": self.before_label_lines,
            "after_label_lines": self.after_label_lines,
        }

# topmark:header:start
#
#   project      : DiagStyle
#   file         : console.py
#   file_relpath : src/diagstyle/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console for user-facing CLI output.

`ClickConsole` keeps program output apart from logging. Its inline styling
uses the same `ColorSpec` values and escape sequences as the diagnostic
sinks, so a word printed by the CLI looks exactly like the same role drawn by
an `AnsiWriter`.
"""

from __future__ import annotations

import sys
from typing import Final, TextIO

import click

from diagstyle.rendering.sinks import ANSI_RESET, ansi_sequence
from diagstyle.rendering.styles import Color, ColorSpec

EMPHASIS: Final[ColorSpec] = ColorSpec(bold=True)
WARNING_SPEC: Final[ColorSpec] = ColorSpec(fg=Color.YELLOW)
ERROR_SPEC: Final[ColorSpec] = ColorSpec(fg=Color.RED, bold=True, intense=True)


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, `styled()` emits ANSI escape sequences.
            Otherwise, all output is plain text.
        out (TextIO | None): Stream for standard output. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for warnings and errors. Defaults to `sys.stderr`.
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.echo(self.styled(text, WARNING_SPEC), nl=nl, file=self.err, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.echo(self.styled(text, ERROR_SPEC), nl=nl, file=self.err, color=self.enable_color)

    def styled(self, text: str, spec: ColorSpec = EMPHASIS) -> str:
        """Wrap `text` in the escape sequences for `spec`.

        Args:
            text (str): Text to style.
            spec (ColorSpec): Style to apply; bold by default.

        Returns:
            str: The styled text, or `text` unchanged if color is disabled.
        """
        if not self.enable_color:
            return text
        return f"{ansi_sequence(spec)}{text}{ANSI_RESET}"

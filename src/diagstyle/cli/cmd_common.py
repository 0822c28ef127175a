# topmark:header:start
#
#   project      : DiagStyle
#   file         : cmd_common.py
#   file_relpath : src/diagstyle/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by DiagStyle subcommands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from diagstyle.rendering.sinks import make_writer
from diagstyle.rendering.writer import StylesWriter

if TYPE_CHECKING:
    from diagstyle.cli.console import ClickConsole
    from diagstyle.rendering.sinks import AnsiWriter, NoColorWriter
    from diagstyle.rendering.styles import Styles


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the context (0 = terse)."""
    return int(ctx.obj.get("verbosity", 0))


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console created by the group callback."""
    return ctx.obj["console"]


def make_styles_writer(
    ctx: click.Context,
    styles: Styles,
) -> StylesWriter[AnsiWriter | NoColorWriter]:
    """Bind `styles` to a sink over the console's stdout.

    The sink is chosen from the color capability resolved once by the group
    callback (``ctx.obj["color_enabled"]``).

    Args:
        ctx (click.Context): Current Click context.
        styles (Styles): Palette to bind.

    Returns:
        StylesWriter[AnsiWriter | NoColorWriter]: The style writer.
    """
    console = get_console(ctx)
    sink = make_writer(console.out, enable_color=bool(ctx.obj.get("color_enabled")))
    return StylesWriter(sink, styles)

# topmark:header:start
#
#   project      : DiagStyle
#   file         : config.py
#   file_relpath : src/diagstyle/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagStyle `config` command.

Shows the effective rendering configuration: the defaults, with any command
line overrides applied through `Config.with_overrides`.
"""

from __future__ import annotations

import json
from typing import Any

import click

from diagstyle.cli.cli_types import EnumChoiceParam
from diagstyle.cli.cmd_common import get_console, get_effective_verbosity
from diagstyle.cli.options import ascii_option, output_format_option
from diagstyle.cli_shared.utils import OutputFormat
from diagstyle.config.logging import get_logger
from diagstyle.config.model import Config, DisplayStyle
from diagstyle.rendering.chars import Chars

logger = get_logger(__name__)


@click.command(
    name="config",
    help="Show the effective rendering configuration.",
)
@click.option(
    "--display-style",
    type=EnumChoiceParam(DisplayStyle),
    default=None,
    help=f"Display style ({', '.join(v.value for v in DisplayStyle)}).",
)
@click.option("--tab-width", type=int, default=None, help="Column width of tabs.")
@click.option(
    "--start-context-lines",
    type=int,
    default=None,
    help="Lines shown after the start of a multi-line label.",
)
@click.option(
    "--end-context-lines",
    type=int,
    default=None,
    help="Lines shown before the end of a multi-line label.",
)
@ascii_option
@output_format_option
def config_command(
    *,
    display_style: DisplayStyle | None = None,
    tab_width: int | None = None,
    start_context_lines: int | None = None,
    end_context_lines: int | None = None,
    use_ascii: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """Show the effective rendering configuration.

    Args:
        display_style (DisplayStyle | None): Display style override.
        tab_width (int | None): Tab width override.
        start_context_lines (int | None): Override for `start_context_lines`.
        end_context_lines (int | None): Override for `end_context_lines`.
        use_ascii (bool): Use the ASCII glyph set.
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    overrides: dict[str, Any] = {
        "display_style": display_style,
        "tab_width": tab_width,
        "start_context_lines": start_context_lines,
        "end_context_lines": end_context_lines,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if use_ascii:
        overrides["chars"] = Chars.ascii()
    logger.debug("Config overrides: %s", sorted(overrides))
    config = Config.default().with_overrides(**overrides)
    data = config.to_dict()

    if output_format == OutputFormat.JSON:
        console.print(json.dumps(data, indent=2, ensure_ascii=False))
        return

    glyphs: dict[str, str] = data.pop("chars")
    for key, value in data.items():
        console.print(f"{key} = {value}")
    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("chars:"))
        for role, glyph in glyphs.items():
            console.print(f"  {role} = {glyph}")
    else:
        console.print(f"chars.snippet_start = {glyphs['snippet_start']}")

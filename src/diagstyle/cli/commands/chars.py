# topmark:header:start
#
#   project      : DiagStyle
#   file         : chars.py
#   file_relpath : src/diagstyle/cli/commands/chars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagStyle `chars` command.

Lists the glyph used for each drawing role of the selected glyph set.
"""

from __future__ import annotations

import json

import click

from diagstyle.cli.cmd_common import get_console
from diagstyle.cli.options import ascii_option, output_format_option
from diagstyle.cli_shared.utils import OutputFormat
from diagstyle.rendering.chars import Chars


@click.command(
    name="chars",
    help="Show the glyphs used to draw source snippets.",
)
@ascii_option
@output_format_option
def chars_command(
    *,
    use_ascii: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """Show the glyphs used to draw source snippets.

    Args:
        use_ascii (bool): Show the ASCII glyph set instead of box drawing.
        output_format (OutputFormat | None): Optional output format.
    """
    console = get_console(click.get_current_context())
    chars = Chars.ascii() if use_ascii else Chars.box_drawing()
    glyphs = chars.to_dict()

    if output_format == OutputFormat.JSON:
        console.print(json.dumps(glyphs, indent=2, ensure_ascii=False))
        return

    width = max(len(role) for role in glyphs)
    for role, glyph in glyphs.items():
        console.print(f"{role:<{width}}  {console.styled(glyph)}")

# topmark:header:start
#
#   project      : DiagStyle
#   file         : version.py
#   file_relpath : src/diagstyle/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagStyle `version` command.

Prints the current DiagStyle version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from diagstyle.cli.cmd_common import get_console
from diagstyle.cli.options import output_format_option
from diagstyle.cli_shared.utils import OutputFormat
from diagstyle.constants import DIAGSTYLE_VERSION


@click.command(
    name="version",
    help="Show the current version of DiagStyle.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of DiagStyle.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    console = get_console(click.get_current_context())
    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": DIAGSTYLE_VERSION}))
    else:
        console.print(console.styled(DIAGSTYLE_VERSION))

# topmark:header:start
#
#   project      : DiagStyle
#   file         : main.py
#   file_relpath : src/diagstyle/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the DiagStyle CLI.

Key ideas:
- Group-level options (verbosity, color) are resolved once and placed into ``ctx.obj``.
- The color capability is a plain flag; subcommands turn it into a sink with
  `diagstyle.rendering.sinks.make_writer` and never branch on it again.
"""

from __future__ import annotations

import click

from diagstyle.cli.commands.chars import chars_command
from diagstyle.cli.commands.config import config_command
from diagstyle.cli.commands.styles import styles_command
from diagstyle.cli.commands.version import version_command
from diagstyle.cli.console import ClickConsole
from diagstyle.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from diagstyle.cli_shared.color import ColorMode, resolve_color_mode
from diagstyle.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    log_level = resolve_env_log_level() or resolve_verbosity(verbose, quiet)
    ctx.obj["log_level"] = log_level
    ctx.obj["verbosity"] = verbose
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(
        color_mode_override=effective_color_mode,
        output_format=None,
    )
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    logger.debug("Color output %s", "enabled" if enable_color else "disabled")

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="DiagStyle CLI: inspect diagnostic styles, glyph sets and rendering configuration.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the DiagStyle CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'diagstyle styles' to preview the default palette.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(styles_command)

cli.add_command(chars_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()

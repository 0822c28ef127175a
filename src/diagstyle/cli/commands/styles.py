# topmark:header:start
#
#   project      : DiagStyle
#   file         : styles.py
#   file_relpath : src/diagstyle/cli/commands/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagStyle `styles` command.

Prints one line per style role. In the default format each spec description
is written through a `StylesWriter`, so on a color terminal every role shows
up in its own style.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Callable

import click

from diagstyle.cli.cli_types import EnumChoiceParam
from diagstyle.cli.cmd_common import get_console, make_styles_writer
from diagstyle.cli.errors import DiagStyleIOError
from diagstyle.cli.options import output_format_option
from diagstyle.cli_shared.utils import OutputFormat
from diagstyle.config.logging import get_logger
from diagstyle.diagnostic.model import LabelStyle, Severity
from diagstyle.rendering.styles import Color, Styles, default_styles

if TYPE_CHECKING:
    from diagstyle.rendering.styles import ColorSpec
    from diagstyle.rendering.writer import StylesWriter

logger = get_logger(__name__)


def style_roles(
    styles: Styles,
) -> list[tuple[str, ColorSpec, Callable[[StylesWriter[Any]], None]]]:
    """Return ``(role, spec, apply)`` triples for every role of a palette.

    ``apply`` sets the role's style on a `StylesWriter` through its role-based
    operation, so callers never pass raw specs to the sink.
    """
    roles: list[tuple[str, ColorSpec, Callable[[StylesWriter[Any]], None]]] = []
    for sev in reversed(list(Severity)):
        roles.append(
            (f"header.{sev.value}", styles.header(sev), lambda w, s=sev: w.set_header(s))
        )
    roles.append(("header_message", styles.header_message, lambda w: w.set_header_message()))
    for sev in reversed(list(Severity)):
        roles.append(
            (
                f"label.primary.{sev.value}",
                styles.label(sev, LabelStyle.PRIMARY),
                lambda w, s=sev: w.set_label(s, LabelStyle.PRIMARY),
            )
        )
    roles.append(
        (
            "label.secondary",
            styles.label(Severity.ERROR, LabelStyle.SECONDARY),
            lambda w: w.set_label(Severity.ERROR, LabelStyle.SECONDARY),
        )
    )
    roles.append(("line_number", styles.line_number, lambda w: w.set_line_number()))
    roles.append(("source_border", styles.source_border, lambda w: w.set_source_border()))
    roles.append(("note_bullet", styles.note_bullet, lambda w: w.set_note_bullet()))
    return roles


def write_styles(writer: StylesWriter[Any], styles: Styles) -> None:
    """Write the palette preview to `writer`.

    Style calls are skipped entirely when the sink cannot render color.

    Raises:
        OSError: Propagated unchanged from the sink.
    """
    roles = style_roles(styles)
    width = max(len(name) for name, _spec, _apply in roles)
    for name, spec, apply in roles:
        writer.write(f"{name:<{width}}  ")
        if writer.supports_color():
            apply(writer)
        writer.write(spec.describe())
        if writer.supports_color():
            writer.reset()
        writer.write("\n")
    writer.flush()


@click.command(
    name="styles",
    help="Show the style used for each diagnostic role.",
)
@click.option(
    "--accent",
    type=EnumChoiceParam(Color),
    default=None,
    help="Preview the palette built around this accent color instead of the default.",
)
@output_format_option
def styles_command(
    *,
    accent: Color | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Show the style used for each diagnostic role.

    Args:
        accent (Color | None): Optional accent color; the process-wide default
            palette is used when omitted.
        output_format (OutputFormat | None): Optional output format.

    Raises:
        DiagStyleIOError: If the output sink fails.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    styles: Styles = default_styles() if accent is None else Styles.with_accent(accent)
    logger.debug("Rendering palette (accent=%s)", styles.line_number.fg)

    if output_format == OutputFormat.JSON:
        payload = {name: spec.describe() for name, spec, _apply in style_roles(styles)}
        console.print(json.dumps(payload, indent=2))
        return

    writer = make_styles_writer(ctx, styles)
    try:
        write_styles(writer, styles)
    except OSError as exc:
        raise DiagStyleIOError(f"Failed to write styles: {exc}") from exc

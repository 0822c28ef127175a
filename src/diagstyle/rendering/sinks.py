# topmark:header:start
#
#   project      : DiagStyle
#   file         : sinks.py
#   file_relpath : src/diagstyle/rendering/sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Concrete color-capable sinks.

All sinks satisfy the `WriteColor` protocol and can be handed to a
`StylesWriter` interchangeably:

- `AnsiWriter`: writes to a text stream and renders style specs as ANSI SGR
  escape sequences (built with `click.style`).
- `NoColorWriter`: writes to a text stream and ignores style changes.
- `BufferWriter`: keeps text and style operations in memory; mostly useful in
  tests.

Whether a stream gets color is decided once, by `make_writer`, from a flag
resolved at configuration time (see `diagstyle.cli_shared.color`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final, TextIO

import click

from diagstyle.config.logging import get_logger

if TYPE_CHECKING:
    from diagstyle.config.logging import DiagStyleLogger
    from diagstyle.rendering.styles import Color, ColorSpec


logger: DiagStyleLogger = get_logger(__name__)

ANSI_RESET: Final[str] = "\x1b[0m"


def _click_color(color: Color | None, *, intense: bool) -> str | None:
    """Map a `Color` to the name Click uses for it."""
    if color is None:
        return None
    return f"bright_{color.value}" if intense else color.value


def ansi_sequence(spec: ColorSpec) -> str:
    """Return the ANSI escape sequence that switches the terminal to `spec`.

    The sequence starts with a reset so attributes from a previous spec never
    leak into the next one.

    Args:
        spec (ColorSpec): The style to render.

    Returns:
        str: The escape sequence; just the reset for an empty spec.
    """
    if spec.is_none():
        return ANSI_RESET
    codes: str = click.style(
        "",
        fg=_click_color(spec.fg, intense=spec.intense),
        bg=_click_color(spec.bg, intense=spec.intense),
        bold=spec.bold or None,
        dim=spec.dimmed or None,
        underline=spec.underline or None,
        italic=spec.italic or None,
        reset=False,
    )
    return ANSI_RESET + codes


class AnsiWriter:
    """Text-stream sink that renders styles as ANSI escape sequences.

    Args:
        stream (TextIO): The stream to write to.
    """

    stream: TextIO

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def write(self, text: str) -> None:
        """Write text to the stream."""
        self.stream.write(text)

    def flush(self) -> None:
        """Flush the stream."""
        self.stream.flush()

    def supports_color(self) -> bool:
        """Return True; this sink renders styles."""
        return True

    def set_color(self, spec: ColorSpec) -> None:
        """Emit the escape sequence for `spec`."""
        self.stream.write(ansi_sequence(spec))

    def reset(self) -> None:
        """Emit the ANSI reset sequence."""
        self.stream.write(ANSI_RESET)


class NoColorWriter:
    """Text-stream sink that ignores style changes.

    Args:
        stream (TextIO): The stream to write to.
    """

    stream: TextIO

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def write(self, text: str) -> None:
        """Write text to the stream."""
        self.stream.write(text)

    def flush(self) -> None:
        """Flush the stream."""
        self.stream.flush()

    def supports_color(self) -> bool:
        """Return False; styles are never rendered."""
        return False

    def set_color(self, spec: ColorSpec) -> None:
        """Ignore `spec`."""

    def reset(self) -> None:
        """Do nothing."""


@dataclass
class BufferWriter:
    """In-memory sink recording text and style operations in order.

    Each event is a ``(kind, payload)`` tuple where ``kind`` is ``"text"``
    (payload: the written string), ``"set_color"`` (payload: the `ColorSpec`)
    or ``"reset"`` (payload: None).

    Attributes:
        color (bool): Value reported by `supports_color()`.
        events (list[tuple[str, object]]): Recorded operations.
        flushes (int): Number of `flush()` calls.
    """

    color: bool = True
    events: list[tuple[str, object]] = field(default_factory=lambda: [])
    flushes: int = 0

    def write(self, text: str) -> None:
        """Record written text."""
        self.events.append(("text", text))

    def flush(self) -> None:
        """Count a flush."""
        self.flushes += 1

    def supports_color(self) -> bool:
        """Return the configured color capability."""
        return self.color

    def set_color(self, spec: ColorSpec) -> None:
        """Record a style change."""
        self.events.append(("set_color", spec))

    def reset(self) -> None:
        """Record a reset."""
        self.events.append(("reset", None))

    def getvalue(self) -> str:
        """Return all written text, without style information."""
        return "".join(str(payload) for kind, payload in self.events if kind == "text")


def make_writer(stream: TextIO, *, enable_color: bool) -> AnsiWriter | NoColorWriter:
    """Return the sink matching a resolved color capability.

    Args:
        stream (TextIO): The stream to write to.
        enable_color (bool): Whether ANSI styles should be emitted.

    Returns:
        AnsiWriter | NoColorWriter: `AnsiWriter` if color is enabled,
            `NoColorWriter` otherwise.
    """
    logger.trace("Selecting %s sink", "ANSI" if enable_color else "plain")
    if enable_color:
        return AnsiWriter(stream)
    return NoColorWriter(stream)

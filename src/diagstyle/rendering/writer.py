# topmark:header:start
#
#   project      : DiagStyle
#   file         : writer.py
#   file_relpath : src/diagstyle/rendering/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style writers: drive a color-capable sink from a style palette.

Two structural interfaces are defined here:

- `WriteColor`: what a sink must provide. Ordinary `write`/`flush`, plus
  `set_color(spec)` and `reset()`. A real terminal stream, an in-memory buffer
  and a no-op sink all satisfy it (see `diagstyle.rendering.sinks`).
- `WriteStyle`: what a renderer talks to. One *set style for role X*
  operation per semantic role, plus `reset()`, so rendering code manipulates
  role names and never raw colors.

`StylesWriter` binds a sink to a borrowed `Styles` palette and implements
`WriteStyle` by looking up each role's spec and forwarding it to the sink.
Calls are synchronous and unbuffered; any exception the sink raises
propagates unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

from diagstyle.rendering.styles import default_styles

if TYPE_CHECKING:
    from diagstyle.diagnostic.model import LabelStyle, Severity
    from diagstyle.rendering.styles import ColorSpec, Styles


class WriteColor(Protocol):
    """Minimal interface for a color-capable output sink."""

    def write(self, text: str) -> None:
        """Write text to the sink."""
        ...

    def flush(self) -> None:
        """Flush any buffered output."""
        ...

    def supports_color(self) -> bool:
        """Return True if `set_color` has a visible effect on this sink."""
        ...

    def set_color(self, spec: ColorSpec) -> None:
        """Apply a style spec to subsequent writes."""
        ...

    def reset(self) -> None:
        """Return to unstyled output."""
        ...


class WriteStyle(Protocol):
    """Role-based styling surface used by diagnostic renderers."""

    def set_header(self, severity: Severity) -> None:
        """Apply the header style for `severity`."""
        ...

    def set_header_message(self) -> None:
        """Apply the header message style."""
        ...

    def set_line_number(self) -> None:
        """Apply the line number style."""
        ...

    def set_note_bullet(self) -> None:
        """Apply the note bullet style."""
        ...

    def set_source_border(self) -> None:
        """Apply the source border style."""
        ...

    def set_label(self, severity: Severity, label_style: LabelStyle) -> None:
        """Apply the label style for `severity` and `label_style`."""
        ...

    def reset(self) -> None:
        """Return to unstyled output."""
        ...


W = TypeVar("W", bound=WriteColor)


class StylesWriter(Generic[W]):
    """Sink wrapper that applies palette styles by role.

    Args:
        writer (W): The sink to write to. Owned by this wrapper for its lifetime.
        styles (Styles): The palette to read specs from. Borrowed; it must stay
            valid for as long as the wrapper is used.

    Attributes:
        writer (W): The wrapped sink.
        styles (Styles): The bound palette.
    """

    writer: W
    styles: Styles

    def __init__(self, writer: W, styles: Styles) -> None:
        self.writer = writer
        self.styles = styles

    @classmethod
    def for_default(cls, writer: W) -> StylesWriter[W]:
        """Bind `writer` to the process-wide default palette."""
        return cls(writer, default_styles())

    def write(self, text: str) -> None:
        """Write text to the wrapped sink."""
        self.writer.write(text)

    def flush(self) -> None:
        """Flush the wrapped sink."""
        self.writer.flush()

    def supports_color(self) -> bool:
        """Return True if the wrapped sink renders styles."""
        return self.writer.supports_color()

    def set_header(self, severity: Severity) -> None:
        """Apply the header style for `severity`."""
        self.writer.set_color(self.styles.header(severity))

    def set_header_message(self) -> None:
        """Apply the header message style."""
        self.writer.set_color(self.styles.header_message)

    def set_line_number(self) -> None:
        """Apply the line number style."""
        self.writer.set_color(self.styles.line_number)

    def set_note_bullet(self) -> None:
        """Apply the note bullet style."""
        self.writer.set_color(self.styles.note_bullet)

    def set_source_border(self) -> None:
        """Apply the source border style."""
        self.writer.set_color(self.styles.source_border)

    def set_label(self, severity: Severity, label_style: LabelStyle) -> None:
        """Apply the label style for `severity` and `label_style`."""
        self.writer.set_color(self.styles.label(severity, label_style))

    def reset(self) -> None:
        """Return the wrapped sink to unstyled output."""
        self.writer.reset()

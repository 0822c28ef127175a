# topmark:header:start
#
#   project      : DiagStyle
#   file         : test_styles_writer.py
#   file_relpath : tests/rendering/test_styles_writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `StylesWriter`, the role-based adapter over a color sink."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import pytest

from diagstyle.diagnostic.model import LabelStyle, Severity
from diagstyle.rendering.sinks import BufferWriter
from diagstyle.rendering.styles import Color, Styles, default_styles
from diagstyle.rendering.writer import StylesWriter

if TYPE_CHECKING:
    from diagstyle.rendering.styles import ColorSpec


class FailingWriter(BufferWriter):
    """Sink whose every operation fails with the same error."""

    def __init__(self, error: OSError) -> None:
        super().__init__()
        self.error = error

    def write(self, text: str) -> None:
        raise self.error

    def flush(self) -> None:
        raise self.error

    def set_color(self, spec: ColorSpec) -> None:
        raise self.error

    def reset(self) -> None:
        raise self.error


FORWARDED_CALLS: list[tuple[str, Callable[[StylesWriter[BufferWriter]], None]]] = [
    ("header", lambda w: w.set_header(Severity.WARNING)),
    ("header_message", lambda w: w.set_header_message()),
    ("line_number", lambda w: w.set_line_number()),
    ("note_bullet", lambda w: w.set_note_bullet()),
    ("source_border", lambda w: w.set_source_border()),
    ("label", lambda w: w.set_label(Severity.NOTE, LabelStyle.PRIMARY)),
    ("reset", lambda w: w.reset()),
    ("write", lambda w: w.write("error[E0308]")),
    ("flush", lambda w: w.flush()),
]


@pytest.mark.rendering
def test_role_operations_forward_palette_specs() -> None:
    """Each role operation forwards exactly the palette's spec for that role."""
    styles = Styles.with_accent(Color.MAGENTA)
    sink = BufferWriter()
    writer = StylesWriter(sink, styles)

    writer.set_header(Severity.BUG)
    writer.set_header_message()
    writer.set_line_number()
    writer.set_note_bullet()
    writer.set_source_border()
    writer.set_label(Severity.WARNING, LabelStyle.PRIMARY)
    writer.set_label(Severity.HELP, LabelStyle.SECONDARY)
    writer.reset()

    assert sink.events == [
        ("set_color", styles.header(Severity.BUG)),
        ("set_color", styles.header_message),
        ("set_color", styles.line_number),
        ("set_color", styles.note_bullet),
        ("set_color", styles.source_border),
        ("set_color", styles.label(Severity.WARNING, LabelStyle.PRIMARY)),
        ("set_color", styles.secondary_label),
        ("reset", None),
    ]


@pytest.mark.rendering
def test_write_and_flush_pass_through() -> None:
    """Text and flushes reach the sink unchanged and in order."""
    sink = BufferWriter()
    writer = StylesWriter(sink, Styles.default())

    writer.write("error")
    writer.set_header_message()
    writer.write(": oops")
    writer.reset()
    writer.flush()

    assert sink.getvalue() == "error: oops"
    assert [kind for kind, _ in sink.events] == ["text", "set_color", "text", "reset"]
    assert sink.flushes == 1


@pytest.mark.rendering
def test_supports_color_reflects_sink() -> None:
    """The adapter reports the sink's color capability."""
    assert StylesWriter(BufferWriter(color=True), Styles.default()).supports_color()
    assert not StylesWriter(BufferWriter(color=False), Styles.default()).supports_color()


@pytest.mark.rendering
def test_for_default_binds_shared_palette() -> None:
    """`for_default` binds the process-wide default palette itself."""
    writer = StylesWriter.for_default(BufferWriter())
    assert writer.styles is default_styles()


@pytest.mark.rendering
@pytest.mark.parametrize(
    ("role", "call"), FORWARDED_CALLS, ids=[name for name, _ in FORWARDED_CALLS]
)
def test_sink_failure_propagates_unmodified(
    role: str, call: Callable[[StylesWriter[BufferWriter]], None]
) -> None:
    """A failing sink makes every forwarded operation raise that same error object."""
    error = OSError(5, "terminal went away")
    writer = StylesWriter(FailingWriter(error), Styles.default())

    with pytest.raises(OSError) as excinfo:
        call(writer)

    assert excinfo.value is error, role

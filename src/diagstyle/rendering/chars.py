# topmark:header:start
#
#   project      : DiagStyle
#   file         : chars.py
#   file_relpath : src/diagstyle/rendering/chars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Glyph sets used to draw source snippets.

A `Chars` instance holds the literal characters a renderer uses for snippet
borders, carets and multi-line connectors. The renderer picks a glyph by its
role (field name); nothing here is computed.

Two presets exist:

- `Chars.box_drawing()` (the default) uses Unicode box-drawing characters:

  ```text
  error[E0001]: unexpected type in `+` application
    ┌─ test:2:9
    │
  2 │ (+ test "")
    │         ^^ expected `Int` but found `String`
    │
    = expected type `Int`
  ```

- `Chars.ascii()` only uses ASCII, for terminals whose font renders box
  drawing poorly. The output then looks close to rustc's:

  ```text
    --> test:2:9
    |
  2 | (+ test "")
    |         ^^ expected `Int` but found `String`
  ```
"""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Chars:
    """Characters to use when rendering a diagnostic.

    Attributes:
        snippet_start: Top-left border of the snippet (`"┌─"` or `"-->"`).
        source_border_left: Left border of the source (`'│'` or `'|'`).
        source_border_left_break: Left border break of the source (`'·'` or `'.'`).
        note_bullet: Note bullet (`'='`).
        single_primary_caret: Marks a single-line primary label (`'^'`).
        single_secondary_caret: Marks a single-line secondary label (`'-'`).
        multi_primary_caret_start: Start of a multi-line primary label (`'^'`).
        multi_primary_caret_end: End of a multi-line primary label (`'^'`).
        multi_secondary_caret_start: Start of a multi-line secondary label (`"'"`).
        multi_secondary_caret_end: End of a multi-line secondary label (`"'"`).
        multi_top_left: Top-left corner of a multi-line label (`'╭'` or `'/'`).
        multi_top: Top of a multi-line label (`'─'` or `'-'`).
        multi_bottom_left: Bottom-left corner of a multi-line label (`'╰'` or `'\\'`).
        multi_bottom: Bottom of a multi-line label (`'─'` or `'-'`).
        multi_left: Left of a multi-line label (`'│'` or `'|'`).
        pointer_left: Left of a pointer underneath a caret (`'│'` or `'|'`).
    """

    snippet_start: str
    source_border_left: str
    source_border_left_break: str

    note_bullet: str

    single_primary_caret: str
    single_secondary_caret: str

    multi_primary_caret_start: str
    multi_primary_caret_end: str
    multi_secondary_caret_start: str
    multi_secondary_caret_end: str
    multi_top_left: str
    multi_top: str
    multi_bottom_left: str
    multi_bottom: str
    multi_left: str

    pointer_left: str

    @classmethod
    def default(cls) -> Chars:
        """Return the default glyph set (`box_drawing`)."""
        return cls.box_drawing()

    @classmethod
    def box_drawing(cls) -> Chars:
        """Return a glyph set that uses Unicode box drawing characters."""
        return cls(
            snippet_start="┌─",
            source_border_left="│",
            source_border_left_break="·",
            note_bullet="=",
            single_primary_caret="^",
            single_secondary_caret="-",
            multi_primary_caret_start="^",
            multi_primary_caret_end="^",
            multi_secondary_caret_start="'",
            multi_secondary_caret_end="'",
            multi_top_left="╭",
            multi_top="─",
            multi_bottom_left="╰",
            multi_bottom="─",
            multi_left="│",
            pointer_left="│",
        )

    @classmethod
    def ascii(cls) -> Chars:
        """Return a glyph set that only uses ASCII characters.

        `note_bullet` and both single-line carets are already ASCII and are
        shared with the box-drawing preset.
        """
        return cls(
            snippet_start="-->",
            source_border_left="|",
            source_border_left_break=".",
            note_bullet="=",
            single_primary_caret="^",
            single_secondary_caret="-",
            multi_primary_caret_start="^",
            multi_primary_caret_end="^",
            multi_secondary_caret_start="'",
            multi_secondary_caret_end="'",
            multi_top_left="/",
            multi_top="-",
            multi_bottom_left="\\",
            multi_bottom="-",
            multi_left="|",
            pointer_left="|",
        )

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly mapping of glyph role to glyph."""
        return asdict(self)

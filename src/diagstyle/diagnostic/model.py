# topmark:header:start
#
#   project      : DiagStyle
#   file         : model.py
#   file_relpath : src/diagstyle/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic lookup keys consumed by the style layer.

The diagnostic data model itself (messages, notes, labelled spans) belongs to
the renderer's callers. DiagStyle only needs two closed enumerations to decide
how things look:

Sections:
    * Severity: criticality of a diagnostic, ordered from least to most severe.
    * LabelStyle: whether a labelled span is the main culprit or supporting context.
"""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Criticality level of a diagnostic, used as a palette lookup key."""

    HELP = "help"
    NOTE = "note"
    WARNING = "warning"
    ERROR = "error"
    BUG = "bug"


class LabelStyle(str, Enum):
    """Role of a labelled source span within a diagnostic.

    Attributes:
        PRIMARY: The span that is the main cause of the diagnostic.
        SECONDARY: A span providing supporting context.
    """

    PRIMARY = "primary"
    SECONDARY = "secondary"

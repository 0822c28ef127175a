# topmark:header:start
#
#   project      : DiagStyle
#   file         : utils.py
#   file_relpath : src/diagstyle/cli_shared/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output-format helpers shared by DiagStyle frontends."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable, never colored).
    """

    DEFAULT = "default"
    JSON = "json"

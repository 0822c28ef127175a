# topmark:header:start
#
#   project      : DiagStyle
#   file         : __init__.py
#   file_relpath : src/diagstyle/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic lookup keys.

`Severity` and `LabelStyle` are used purely as keys into a style palette; this
package owns no diagnostic content.
"""

from __future__ import annotations

from diagstyle.diagnostic.model import LabelStyle, Severity

__all__ = [
    "LabelStyle",
    "Severity",
]

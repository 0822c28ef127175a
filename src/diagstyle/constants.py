# topmark:header:start
#
#   project      : DiagStyle
#   file         : constants.py
#   file_relpath : src/diagstyle/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagStyle Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    DIAGSTYLE_VERSION: str = get_version("diagstyle")
except PackageNotFoundError:  # running from a source checkout
    DIAGSTYLE_VERSION = "0.0.0"

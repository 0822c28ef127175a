# topmark:header:start
#
#   project      : DiagStyle
#   file         : __main__.py
#   file_relpath : src/diagstyle/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for ``python -m diagstyle``.

Examples:
    Show the default palette::

        python -m diagstyle styles
"""

from __future__ import annotations

from diagstyle.cli.main import cli

if __name__ == "__main__":
    cli()

# topmark:header:start
#
#   project      : DiagStyle
#   file         : __init__.py
#   file_relpath : src/diagstyle/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent helpers shared by DiagStyle frontends."""

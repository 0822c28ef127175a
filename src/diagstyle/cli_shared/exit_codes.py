# topmark:header:start
#
#   project      : DiagStyle
#   file         : exit_codes.py
#   file_relpath : src/diagstyle/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the DiagStyle CLI.

DiagStyle aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the DiagStyle CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        IO_ERROR: The output sink failed while writing or styling. Mirrors BSD
            ``EX_IOERR (74)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    IO_ERROR = 74  # EX_IOERR

    UNEXPECTED_ERROR = 255

# topmark:header:start
#
#   project      : REPLference
#   file         : exit_codes.py
#   file_relpath : src/replference/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by the REPLference CLI application.

REPLference follows the BSD `sysexits` convention where practical so other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for REPLference CLI.

    Attributes:
        SUCCESS: Successful execution. Unknown topic names also exit with
            SUCCESS: name lookup is permissive by contract.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        UNSUPPORTED_TYPE: The requested object has no reference topic. Mirrors
            BSD ``EX_UNAVAILABLE (69)``.
        CONTENT_ERROR: Bundled content is missing or malformed (internal
            error). Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error writing an output file. Mirrors BSD ``EX_IOERR (74)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    UNSUPPORTED_TYPE = 69  # EX_UNAVAILABLE
    CONTENT_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR

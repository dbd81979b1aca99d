# topmark:header:start
#
#   project      : MimeGlob
#   file         : exit_codes.py
#   file_relpath : src/mimeglob/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for MimeGlob CLI.

MimeGlob aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. ``NO_MATCH = 1`` follows grep: the command ran fine
but at least one queried name matched no pattern.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for MimeGlob CLI.

    Attributes:
        SUCCESS: Successful execution; every queried name matched.
        NO_MATCH: At least one queried name matched no pattern.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        DATA_ERROR: Malformed glob pattern. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: A registry file does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: A registry file cannot be read. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    NO_MATCH = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255

# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/optsift/cli/exit_codes.py
#   project      : Optsift
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Optsift CLI.

Optsift aligns with the BSD `sysexits` convention so other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Optsift CLI.

    Attributes:
        SUCCESS: Classification completed without misuse. An exit-early
            classification also exits with SUCCESS; the report says so.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: The classified arguments contain misuse, or the CLI itself
            was invoked incorrectly. Mirrors BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: The vocabulary is missing, unreadable or malformed.
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255

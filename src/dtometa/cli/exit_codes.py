# topmark:header:start
#
#   project      : DtoMeta
#   file         : exit_codes.py
#   file_relpath : src/dtometa/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the DtoMeta CLI.

DtoMeta aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the DtoMeta CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure.
        PROPERTIES_DROPPED: Metadata was produced, but at least one property
            failed to resolve and was left out (``--strict`` only).
        USAGE_ERROR: Command-line invocation error, including an unknown class
            name. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: The module to scan cannot be imported. Mirrors BSD
            ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error. Mirrors BSD ``EX_SOFTWARE (70)``.
    """

    SUCCESS = 0
    FAILURE = 1
    PROPERTIES_DROPPED = 2
    USAGE_ERROR = 64
    FILE_NOT_FOUND = 66
    UNEXPECTED_ERROR = 70
    CONFIG_ERROR = 78

# topmark:header:start
#
#   project      : BulletList
#   file         : exit_codes.py
#   file_relpath : src/bulletlist/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the BulletList CLI.

Values follow the BSD `sysexits` convention where practical, so that shell
scripts can tell a bad invocation from bad data or a broken config file.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the BulletList CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Input that cannot be converted, e.g. a number outside the
            Roman numeral range. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Unreadable or malformed config file. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG

# topmark:header:start
#
#   project      : CodeStamp
#   file         : exit_codes.py
#   file_relpath : src/codestamp/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for CodeStamp errors.

CodeStamp aligns with the BSD `sysexits` convention so that build scripts
invoking `codestamp render` can tell a bad template from a missing formatter.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for CodeStamp.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        TEMPLATE_ERROR: Template failed to parse or execute against its data.
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Template or data input does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        TOOL_ERROR: External formatter or import resolver failed or could not be
            launched. Mirrors BSD ``EX_UNAVAILABLE (69)``.
        IO_ERROR: I/O error reading/writing the output file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid generation options. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    TEMPLATE_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    TOOL_ERROR = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

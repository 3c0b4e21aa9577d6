"""Data models for CLI operations."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for the revue-check command.

    - SUCCESS (0): Every check passed
    - GENERAL_ERROR (1): Configuration problem or unexpected error
    - CHECKS_FAILED (2): At least one check failed
    - AUTH_ERROR (3): Authentication failed, no checks were run
    - NETWORK_ERROR (4): The API could not be reached

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    CHECKS_FAILED = 2
    AUTH_ERROR = 3
    NETWORK_ERROR = 4

"""Exit codes for the ghrelease CLI.

The numeric values are process exit codes and should remain stable:
- 0: Success
- 1: User error (unset required settings, bad arguments)
- 2: Environment error (missing or unreadable config file)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2


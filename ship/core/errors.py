"""Process exit codes used by the ``ship`` CLI."""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    Calling scripts check these instead of console text, so the values
    must stay stable:
    - 0: Success
    - 1: User error (bad option value)
    - 2: Environment error (no project, missing flutter/scp, bad ship.toml)
    - 3: Build error (flutter build failed)
    - 4: Network error (remote copy failed)
    - 5: I/O error (local copy failed)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    BUILD_ERROR = 3
    NETWORK_ERROR = 4
    IO_ERROR = 5

"""Process exit codes for the ``tag`` CLI.

Values are used as shell exit codes and should remain stable:
- 0: Success (including a declined confirmation)
- 1: User error (bad input)
- 2: Git error (tag creation refused, not a repository, git missing)
- 4: Network error (push or fetch against the remote failed)
- 5: I/O error (config file could not be written or deleted)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    OK = 0
    USER_ERROR = 1
    GIT_ERROR = 2
    NETWORK_ERROR = 4
    IO_ERROR = 5

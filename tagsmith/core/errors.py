"""Exit codes for the tagsmith command.

The numeric values are part of the command-line contract and should remain
stable. Failing external tools do not map to a member here: their own exit
code is propagated instead.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for a release run.

    - 0: Success
    - 1: User error (dirty tree, declined suggestion, invalid version tag)
    - 2: Environment error (not a repository, missing tool, bad config)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2

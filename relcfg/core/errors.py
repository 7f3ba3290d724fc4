"""Exit codes for the relcfg CLI.

Each failure class that can end a run maps to one stable process exit code.
Per-branch resolution problems never end a run, so they have no code here.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (invalid config file, bad arguments)
    - 2: Environment error (not a git clone, git missing, branch listing failed)
    - 5: I/O error (output file could not be written)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 5

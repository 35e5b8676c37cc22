"""Run a command with environment variables loaded from a directory.

Re-exports public symbols so callers can write::

    from py_envdir import read_dir, run_cmd
"""

from py_envdir.env import EnvironmentList
from py_envdir.reader import VARIABLE_NAME_PATTERN, ReadDirError, is_variable_name, read_dir
from py_envdir.runner import (
    CommandExitError,
    CommandNotFoundError,
    CommandSignalError,
    EmptyCommandError,
    RunCmdError,
    run_cmd,
)

__all__ = [
    "VARIABLE_NAME_PATTERN",
    "CommandExitError",
    "CommandNotFoundError",
    "CommandSignalError",
    "EmptyCommandError",
    "EnvironmentList",
    "ReadDirError",
    "RunCmdError",
    "is_variable_name",
    "read_dir",
    "run_cmd",
]

"""Command runner — exec a program with an envdir merged in.

The child inherits our standard streams, so its output goes straight to
the terminal (or wherever our own stdout points).  The only thing we
change is its environment: the inherited variables plus everything from
the ``EnvironmentList``, with the list winning on name clashes.

Every way the child can fail is reported as a ``RunCmdError`` subclass
whose message reads the way a shell user would expect:

- ``exec: "nope": executable file not found in $PATH``
- ``exit status 2``
- ``signal: killed``
"""

import os
import signal
import subprocess
from collections.abc import Mapping, Sequence

from py_envdir.env import EnvironmentList


class RunCmdError(Exception):
    """Raised when a command cannot be run or does not succeed."""


class EmptyCommandError(RunCmdError):
    """Raised when there is no command to run at all."""

    def __init__(self) -> None:
        """Create the error with its fixed message."""
        super().__init__("command to run is empty")


class CommandNotFoundError(RunCmdError):
    """Raised when a bare executable name cannot be found on ``$PATH``."""

    def __init__(self, name: str) -> None:
        """Create the error for the missing executable *name*."""
        super().__init__(f'exec: "{name}": executable file not found in $PATH')
        self.name = name


class CommandExitError(RunCmdError):
    """Raised when the command exits with a non-zero status."""

    def __init__(self, returncode: int) -> None:
        """Create the error for exit status *returncode*."""
        super().__init__(f"exit status {returncode}")
        self.returncode = returncode


class CommandSignalError(RunCmdError):
    """Raised when the command is terminated by a signal."""

    def __init__(self, signum: int) -> None:
        """Create the error for signal number *signum*."""
        super().__init__(f"signal: {_describe_signal(signum)}")
        self.signal = signum


def _describe_signal(signum: int) -> str:
    """Return a lowercase description like ``killed`` for *signum*."""
    try:
        description = signal.strsignal(signum)
    except ValueError:
        description = None
    return description.lower() if description else f"signal {signum}"


def _is_path(name: str) -> bool:
    """Return True if *name* names a file directly rather than via ``$PATH``."""
    return os.sep in name or (os.altsep is not None and os.altsep in name)


def run_cmd(
    cmd: Sequence[str],
    env: EnvironmentList,
    *,
    base_env: Mapping[str, str] | None = None,
) -> None:
    """Run *cmd* to completion with *env* layered over the inherited one.

    Args:
        cmd: The executable followed by its arguments.
        env: Variables that override the inherited environment.
        base_env: The inherited environment.  Defaults to ``os.environ``.

    Raises:
        EmptyCommandError: If *cmd* is empty; nothing is spawned.
        CommandNotFoundError: If a bare executable name is not on ``$PATH``.
        CommandExitError: If the command exits non-zero.
        CommandSignalError: If the command is killed by a signal.
        RunCmdError: For any other failure to start the command.

    """
    if not cmd:
        raise EmptyCommandError

    name = cmd[0]
    child_env = env.merged_into(os.environ if base_env is None else base_env)

    try:
        completed = subprocess.run(list(cmd), env=child_env, check=False)  # noqa: S603
    except FileNotFoundError as e:
        if not _is_path(name):
            raise CommandNotFoundError(name) from e
        raise RunCmdError(f"fork/exec {name}: no such file or directory") from e
    except OSError as e:
        reason = e.strerror.lower() if e.strerror else str(e)
        raise RunCmdError(f'exec: "{name}": {reason}') from e
    except ValueError as e:
        # e.g. a NUL byte in an argument or a variable value
        raise RunCmdError(f'exec: "{name}": {e}') from e

    if completed.returncode < 0:
        raise CommandSignalError(-completed.returncode)
    if completed.returncode != 0:
        raise CommandExitError(completed.returncode)

"""Command-line entry point: ``py-envdir <env-dir> <command> [args...]``.

This module is the thin I/O wrapper around the reader and the runner.
It turns their exceptions into an error entry echoed on standard error
and an exit status, and does nothing else:

    1. **Parse** — the first argument is the envdir, the rest is the
       command, passed through untouched (flags included).
    2. **Read** — build an ``EnvironmentList`` from the envdir.
    3. **Run** — exec the command with that list merged in.
"""

import sys
from collections.abc import Sequence

from py_envdir.logging import Logger
from py_envdir.reader import ReadDirError, read_dir
from py_envdir.runner import RunCmdError, run_cmd

EXIT_SUCCESS_CODE = 0
EXIT_ERROR_CODE = 1

USAGE = "you should pass the path to dir for environment variables and command to run"

_SOURCE = "cli"


def main(argv: Sequence[str] | None = None, *, logger: Logger | None = None) -> int:
    """Load the envdir and run the command.

    Args:
        argv: Arguments without the program name.  Defaults to
            ``sys.argv[1:]``.
        logger: Where errors go.  Defaults to a logger that echoes to
            standard error.

    Returns:
        ``EXIT_SUCCESS_CODE`` if the command succeeded, otherwise
        ``EXIT_ERROR_CODE``.

    """
    if logger is None:
        logger = Logger(sys.stderr)
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2 or not args[0]:  # noqa: PLR2004
        logger.error(USAGE, source=_SOURCE)
        return EXIT_ERROR_CODE

    env_dir, cmd = args[0], args[1:]

    try:
        env = read_dir(env_dir)
    except ReadDirError as e:
        logger.error(str(e), source=_SOURCE)
        return EXIT_ERROR_CODE

    # Flush our own output before the child starts writing to the same fds.
    sys.stdout.flush()
    try:
        run_cmd(cmd, env)
    except RunCmdError as e:
        logger.error(str(e), source=_SOURCE)
        return EXIT_ERROR_CODE
    return EXIT_SUCCESS_CODE


def run() -> None:
    """Console-script entry point; exits with ``main()``'s status."""
    sys.exit(main())

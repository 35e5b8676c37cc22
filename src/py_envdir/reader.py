"""Directory reader — turn an envdir into an ``EnvironmentList``.

An envdir holds one file per variable::

    env/
        DATABASE_URL    ->  "postgres://localhost/app\\n"
        DEBUG           ->  "1"
        notes.txt           (skipped: not a variable name)
        secrets/            (skipped: a directory)

The file name is the variable name and the file content, minus any
trailing newlines, is its value.  Only direct children are looked at.

Failures are handled at two levels: if the directory itself cannot
be listed the whole read fails with ``ReadDirError``, but a single
unreadable file only produces a warning and the scan carries on.
"""

import os
import re
import sys
from pathlib import Path

from py_envdir.env import EnvironmentList
from py_envdir.logging import Logger

VARIABLE_NAME_PATTERN = re.compile(r"^[a-zA-Z_$][a-zA-Z_$0-9]*$")

_NEWLINE = "\n"
_SOURCE = "reader"


class ReadDirError(Exception):
    """Raised when the envdir itself cannot be listed.

    Attributes:
        path: The directory that failed.
        env: The (empty) environment list built before the failure.

    """

    def __init__(self, path: str, message: str) -> None:
        """Create the error for *path* with a user-facing *message*."""
        super().__init__(message)
        self.path = path
        self.env = EnvironmentList()


def is_variable_name(name: str) -> bool:
    """Return True if *name* may be used as an environment variable name."""
    return VARIABLE_NAME_PATTERN.match(name) is not None


def _describe_os_error(path: str, error: OSError) -> str:
    """Format *error* as ``open <path>: <reason>``."""
    reason = error.strerror.lower() if error.strerror else str(error)
    return f"open {path}: {reason}"


def read_dir(path: str | os.PathLike[str], *, logger: Logger | None = None) -> EnvironmentList:
    """Scan *path* and return the variables defined in it.

    Args:
        path: The envdir to scan.
        logger: Where per-file warnings go.  Defaults to a logger that
            echoes warnings to standard output.

    Returns:
        One entry per readable file with a valid name and a value that
        is non-empty after trailing newlines are stripped.

    Raises:
        ReadDirError: If the directory cannot be listed.

    """
    if logger is None:
        logger = Logger(sys.stdout)
    directory = os.fspath(path)

    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise ReadDirError(directory, _describe_os_error(directory, e)) from e

    env = EnvironmentList()
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            continue
        if not is_variable_name(entry.name):
            continue
        try:
            content = Path(entry.path).read_bytes()
        except OSError:
            logger.warning(
                f"something bad happened when trying to read file {entry.name}",
                source=_SOURCE,
            )
            continue
        # surrogateescape keeps undecodable bytes intact for the child
        value = content.decode("utf-8", "surrogateescape").rstrip(_NEWLINE)
        if value:
            env.set(entry.name, value)
    return env

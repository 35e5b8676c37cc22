"""Structured logging for envdir runs.

The logger records structured entries for the few things worth
reporting during a run: files that could not be read, and the error
that made the run fail.  It keeps them in memory (so callers and tests
can inspect what happened) and can echo them to a stream as they
arrive:

- **LogLevel** — severity levels ordered for filtering (WARNING < ERROR).
- **LogEntry** — a single structured record (level, message, source).
- **Logger** — an append-only log with filtering and echo.

Design choices:
    - **IntEnum for levels** so they compare naturally with ``<``.
    - **Frozen dataclass for entries** — log records should be immutable.
    - **Echo writes the bare message** — what a user sees on the
      terminal reads like a sentence, not like a log line.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import TextIO


class LogLevel(IntEnum):
    """Severity levels for log entries."""

    WARNING = 1
    ERROR = 2


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The component that generated the event (e.g. "reader").

    """

    level: LogLevel
    message: str
    source: str


class Logger:
    """Append-only log buffer with filtering and optional echo.

    Every entry is also written to *stream* the moment it is logged.
    With no stream the logger is silent and only collects entries.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        """Create an empty logger.

        Args:
            stream: Where to echo entries, or None to stay silent.

        """
        self._entries: list[LogEntry] = []
        self._stream = stream

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in chronological order."""
        return list(self._entries)

    def log(self, level: LogLevel, message: str, *, source: str) -> None:
        """Append a new entry to the log and echo it.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Component that generated the event.

        """
        self._entries.append(LogEntry(level=level, message=message, source=source))
        if self._stream is not None:
            self._stream.write(message + "\n")
            self._stream.flush()

    def warning(self, message: str, *, source: str) -> None:
        """Shorthand for ``log(LogLevel.WARNING, ...)``."""
        self.log(LogLevel.WARNING, message, source=source)

    def error(self, message: str, *, source: str) -> None:
        """Shorthand for ``log(LogLevel.ERROR, ...)``."""
        self.log(LogLevel.ERROR, message, source=source)

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching the given criteria.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.

        Returns:
            A filtered list of log entries.

        """
        result = self._entries
        if min_level is not None:
            result = [e for e in result if e.level >= min_level]
        if source is not None:
            result = [e for e in result if e.source == source]
        return result if result is not self._entries else list(result)

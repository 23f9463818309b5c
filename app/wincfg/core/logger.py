"""Run log for wincfg.

The run log is the audit trail of a batch: every entry is appended as one
line to a log file and, unless silenced, echoed to the console.

Line format:
    [yyyy-MM-dd HH:mm:ss] [INFO|ERROR] <message>
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from wincfg.utils.formatting import console, err_console

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(Enum):
    """Severity of a run log entry."""

    INFO = "INFO"
    ERROR = "ERROR"


class LogWriteError(Exception):
    """Raised when the run log file cannot be written."""


@dataclass(frozen=True, slots=True)
class LogEntry:
    """Single entry of the run log.

    Attributes:
        timestamp: Local time the entry was written.
        level: Entry severity.
        message: Entry text.
    """

    timestamp: datetime
    level: LogLevel
    message: str

    def format(self) -> str:
        """Render the entry as a log file line (without newline)."""
        return f"[{self.timestamp.strftime(TIMESTAMP_FORMAT)}] [{self.level.value}] {self.message}"


class RunLogger:
    """Append-only run log with optional console echo.

    The file is always written; echo only controls whether entries are
    also printed to the console.

    Attributes:
        log_path: File the entries are appended to.
        echo: Whether entries are printed to the console.

    Example:
        >>> run_log = RunLogger(Path("wincfg.log"), echo=False)
        >>> run_log.info("Processing capability: OpenSSH.Client~~~~0.0.1.0")
    """

    def __init__(
        self,
        log_path: Path,
        *,
        echo: bool = True,
        out: Console | None = None,
        err: Console | None = None,
    ) -> None:
        self._log_path = log_path
        self._echo = echo
        self._out = out or console
        self._err = err or err_console
        self._entries: list[LogEntry] = []

    @property
    def log_path(self) -> Path:
        """Return the log file path."""
        return self._log_path

    @property
    def echo(self) -> bool:
        """Check if entries are echoed to the console."""
        return self._echo

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        """Return all entries written so far, oldest first."""
        return tuple(self._entries)

    def info(self, message: str, *, echo: bool | None = None) -> LogEntry:
        """Write an INFO entry."""
        return self.write(LogLevel.INFO, message, echo=echo)

    def error(self, message: str, *, echo: bool | None = None) -> LogEntry:
        """Write an ERROR entry."""
        return self.write(LogLevel.ERROR, message, echo=echo)

    def write(self, level: LogLevel, message: str, *, echo: bool | None = None) -> LogEntry:
        """Append an entry to the log file and echo it.

        Args:
            level: Entry severity.
            message: Entry text.
            echo: Override the logger echo setting for this entry.

        Returns:
            The written LogEntry.

        Raises:
            LogWriteError: If the log file cannot be written.
        """
        entry = LogEntry(timestamp=datetime.now(), level=level, message=message)
        line = entry.format()

        try:
            self._log_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._log_path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            msg = f"Cannot write log file {self._log_path}: {e}"
            raise LogWriteError(msg) from e

        self._entries.append(entry)

        logger.debug("[%s] %s", level.value, message)

        should_echo = self._echo if echo is None else echo
        if should_echo:
            if level == LogLevel.ERROR:
                self._err.print(line, style="log.error", markup=False, highlight=False)
            else:
                self._out.print(line, style="log.info", markup=False, highlight=False)

        return entry

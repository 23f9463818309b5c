"""Unit tests for the run log."""

import io
import re
from datetime import datetime
from pathlib import Path

import pytest
from rich.console import Console
from wincfg.core.logger import LogEntry, LogLevel, LogWriteError, RunLogger
from wincfg.core.theme import get_theme

LINE_PATTERN = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] \[(INFO|ERROR)\] .+$")


def _consoles() -> tuple[Console, Console, io.StringIO, io.StringIO]:
    out_buf, err_buf = io.StringIO(), io.StringIO()
    return Console(file=out_buf, width=200, theme=get_theme()), Console(file=err_buf, width=200, theme=get_theme()), out_buf, err_buf


class TestLogEntry:
    """Tests for LogEntry formatting."""

    def test_format(self) -> None:
        """format() renders timestamp, level and message."""
        entry = LogEntry(
            timestamp=datetime(2024, 3, 5, 7, 8, 9),
            level=LogLevel.ERROR,
            message="Failed to add capability 'X': boom",
        )

        assert entry.format() == "[2024-03-05 07:08:09] [ERROR] Failed to add capability 'X': boom"


class TestRunLogger:
    """Tests for RunLogger."""

    def test_appends_lines_to_file(self, run_log: RunLogger, log_path: Path) -> None:
        """Every entry is one line in the log file."""
        run_log.info("first")
        run_log.error("second")

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert all(LINE_PATTERN.match(line) for line in lines)
        assert lines[0].endswith("[INFO] first")
        assert lines[1].endswith("[ERROR] second")

    def test_appends_to_existing_file(self, log_path: Path) -> None:
        """Existing log content is kept."""
        log_path.parent.mkdir(parents=True)
        log_path.write_text("[2024-01-01 00:00:00] [INFO] earlier run\n")
        out, err, _, _ = _consoles()

        RunLogger(log_path, echo=False, out=out, err=err).info("later run")

        assert log_path.read_text().splitlines()[0].endswith("earlier run")
        assert len(log_path.read_text().splitlines()) == 2

    def test_echo_to_consoles(self, log_path: Path) -> None:
        """INFO goes to the output console, ERROR to the error console."""
        out, err, out_buf, err_buf = _consoles()
        run_log = RunLogger(log_path, echo=True, out=out, err=err)

        run_log.info("hello")
        run_log.error("broken")

        assert "[INFO] hello" in out_buf.getvalue()
        assert "[ERROR] broken" in err_buf.getvalue()
        assert "broken" not in out_buf.getvalue()

    def test_silent_still_writes_file(self, log_path: Path) -> None:
        """echo=False suppresses the console but not the file."""
        out, err, out_buf, err_buf = _consoles()
        run_log = RunLogger(log_path, echo=False, out=out, err=err)

        run_log.error("quiet failure")

        assert out_buf.getvalue() == ""
        assert err_buf.getvalue() == ""
        assert "quiet failure" in log_path.read_text()

    def test_per_entry_echo_override(self, log_path: Path) -> None:
        """echo= on a single entry overrides the logger setting."""
        out, err, out_buf, _ = _consoles()
        run_log = RunLogger(log_path, echo=True, out=out, err=err)

        run_log.info("hidden", echo=False)

        assert out_buf.getvalue() == ""
        assert run_log.entries[0].message == "hidden"

    def test_entries_are_recorded(self, run_log: RunLogger) -> None:
        """entries returns every written entry in order."""
        run_log.info("a")
        run_log.error("b")

        assert [(e.level, e.message) for e in run_log.entries] == [
            (LogLevel.INFO, "a"),
            (LogLevel.ERROR, "b"),
        ]

    def test_unwritable_log_raises(self, tmp_path: Path) -> None:
        """A log path that cannot be opened raises LogWriteError."""
        blocker = tmp_path / "file"
        blocker.write_text("")
        out, err, _, _ = _consoles()
        run_log = RunLogger(blocker / "wincfg.log", echo=False, out=out, err=err)

        with pytest.raises(LogWriteError, match="Cannot write log file"):
            run_log.info("x")
        assert run_log.entries == ()

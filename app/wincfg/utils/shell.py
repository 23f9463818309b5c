"""Shell execution utilities.

Provides subprocess execution for external tools (winget, dism.exe) and
PowerShell scripts.
"""

import subprocess
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0

    @property
    def error_output(self) -> str:
        """Return the most useful error text from the command output."""
        return self.stderr.strip() or self.stdout.strip()


def run_command(
    args: list[str],
    *,
    check: bool = False,
    timeout: float | None = None,
) -> CommandResult:
    """Execute a command and return the result.

    Item operations run without a timeout: a hanging command blocks the
    run until it returns.

    Args:
        args: Command and arguments to execute.
        check: If True, raise CalledProcessError on non-zero exit.
        timeout: Maximum time in seconds to wait for command, or None.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.CalledProcessError: If check=True and command fails.
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=check,
        timeout=timeout,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def run_powershell(script: str, *, timeout: float | None = None) -> CommandResult:
    """Execute a PowerShell script non-interactively.

    Args:
        script: PowerShell source passed to -Command.
        timeout: Maximum time in seconds to wait, or None.

    Returns:
        CommandResult of the powershell process.
    """
    return run_command(
        ["powershell", "-NoProfile", "-NonInteractive", "-Command", script],
        timeout=timeout,
    )


def ps_quote(value: str) -> str:
    """Quote a value as a single-quoted PowerShell string literal."""
    return "'" + value.replace("'", "''") + "'"


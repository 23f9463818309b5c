"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from wincfg.core.theme import get_theme
from wincfg.models.operation import ItemStatus

if TYPE_CHECKING:
    from wincfg.models.operation import ItemResult


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


_STATUS_MARKUP: dict[ItemStatus, str] = {
    ItemStatus.SUCCEEDED: "[success]OK[/success]",
    ItemStatus.FAILED: "[error]FAIL[/error]",
    ItemStatus.SKIPPED: "[muted]SKIP[/muted]",
}


def create_results_table(results: list[ItemResult]) -> Table:
    """Create a Rich table displaying item results.

    Args:
        results: List of item results to display.

    Returns:
        Rich Table configured for results display.
    """
    table = Table(
        title="Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=6, justify="center")
    table.add_column("Category")
    table.add_column("Item", no_wrap=True)
    table.add_column("Message")

    for result in results:
        table.add_row(
            _STATUS_MARKUP[result.status],
            result.category.value,
            result.item,
            f"[muted]{result.message or ''}[/muted]",
        )

    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")

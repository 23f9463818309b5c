"""Utility modules for wincfg.

This module exports commonly used utility functions.
"""

from wincfg.utils.formatting import (
    console,
    create_results_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from wincfg.utils.shell import CommandResult, run_command, run_powershell

__all__ = [
    "CommandResult",
    "console",
    "create_results_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
    "run_powershell",
]

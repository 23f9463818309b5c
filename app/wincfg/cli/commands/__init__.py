"""CLI commands for wincfg.

This package contains all subcommand implementations.
"""

from wincfg.cli.commands import apply, config

__all__ = ["apply", "config"]

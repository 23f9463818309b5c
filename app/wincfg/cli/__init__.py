"""CLI package for wincfg.

This package contains the Typer application and all subcommands.
"""

from wincfg.cli.main import app

__all__ = ["app"]

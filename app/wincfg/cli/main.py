"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer

from wincfg import __version__
from wincfg.cli.commands import apply, config

# Create main Typer app
app = typer.Typer(
    name="wincfg",
    help="Declarative Windows configuration: add or remove listed system items.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"wincfg version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug diagnostics on stderr.",
        ),
    ] = False,
) -> None:
    """wincfg - Declarative Windows configuration.

    Install or remove winget packages, AppX packages, capabilities and
    optional features, and create registry values from plain item files.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register commands
app.add_typer(apply.app, name="apply")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()

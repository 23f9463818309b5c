"""Config command implementation.

Shows and creates the configuration file holding apply defaults.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from wincfg.core.config import ConfigError, WincfgConfig, load_config, save_config
from wincfg.core.paths import get_config_path
from wincfg.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the wincfg configuration file.",
    no_args_is_help=True,
)

ConfigPathOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Configuration file to use."),
]


@app.command()
def path(config_path: ConfigPathOption = None) -> None:
    """Print the configuration file path."""
    target = config_path or get_config_path()
    console.print(str(target), markup=False, highlight=False, soft_wrap=True)


@app.command()
def show(config_path: ConfigPathOption = None) -> None:
    """Show the effective configuration."""
    target = config_path or get_config_path()
    try:
        config = load_config(target)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    table = Table(
        title=f"Configuration ({target})",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value")
    table.add_row("log_file", str(config.effective_log_file))
    table.add_row("silent", str(config.silent))
    table.add_row("dry_run", str(config.dry_run))
    console.print(table)

    if not target.exists():
        print_info("No configuration file found; showing defaults.")


@app.command()
def init(
    config_path: ConfigPathOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing configuration file."),
    ] = False,
) -> None:
    """Create a configuration file with default settings."""
    target = config_path or get_config_path()
    if target.exists() and not force:
        print_error(f"Configuration already exists: {target}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved = save_config(WincfgConfig(), target)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Configuration written to {saved}")

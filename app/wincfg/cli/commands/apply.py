"""Apply command implementation.

Adds or removes every item listed in the supplied item files and writes
the outcome of each item to the run log.
"""

from pathlib import Path
from typing import Annotated

import typer

from wincfg.core.config import ConfigError, load_config
from wincfg.core.loader import ItemSourceError, ItemSources, load_sources
from wincfg.core.logger import LogWriteError, RunLogger
from wincfg.core.paths import get_default_log_path
from wincfg.core.privilege import PrivilegeError, require_admin
from wincfg.core.processor import BatchReport, process_batch
from wincfg.core.table import build_operation_table
from wincfg.models.category import RunMode
from wincfg.operators import get_operators
from wincfg.utils.formatting import (
    console,
    create_results_table,
    print_error,
    print_info,
    print_success,
    print_warning,
)

app = typer.Typer(
    help="Add or remove listed items on this machine.",
    invoke_without_command=True,
)


def _abort(run_log: RunLogger, message: str) -> typer.Exit:
    """Report a fatal error and return the Exit to raise.

    The message is printed immediately and also written to the run log.
    """
    print_error(message)
    try:
        run_log.error(message, echo=False)
    except LogWriteError as e:
        print_error(str(e))
    return typer.Exit(code=1)


def _resolve_mode(add: bool, remove: bool) -> RunMode | None:
    """Return the run mode, or None unless exactly one flag is set."""
    if add == remove:
        return None
    return RunMode.ADD if add else RunMode.REMOVE


def _print_report(report: BatchReport) -> None:
    """Print the results table and a summary line."""
    if report.results:
        console.print(create_results_table(report.results))

    if report.has_failures:
        console.print(
            f"\n[success]{report.succeeded} succeeded[/success], "
            f"[muted]{report.skipped} skipped[/muted], "
            f"[error]{report.failed} failed[/error]"
        )
    else:
        print_success(
            f"All {len(report.results)} item(s) processed "
            f"({report.succeeded} changed, {report.skipped} unchanged)."
        )


@app.callback(invoke_without_command=True)
def apply_items(
    ctx: typer.Context,
    add: Annotated[
        bool,
        typer.Option("--add", "-a", help="Add (install, enable, create) the listed items."),
    ] = False,
    remove: Annotated[
        bool,
        typer.Option("--remove", "-r", help="Remove (uninstall, disable or delete) listed items."),
    ] = False,
    winget_file: Annotated[
        Path | None,
        typer.Option("--winget-file", help="File of winget package identifiers, one per line."),
    ] = None,
    capability_file: Annotated[
        Path | None,
        typer.Option("--capability-file", help="File of Windows capability names, one per line."),
    ] = None,
    feature_file: Annotated[
        Path | None,
        typer.Option("--feature-file", help="File of optional feature names, one per line."),
    ] = None,
    package_file: Annotated[
        Path | None,
        typer.Option(
            "--package-file",
            help=(
                "File of AppX package names, one per line. Remove only: "
                "install applications with --winget-file instead."
            ),
        ),
    ] = None,
    provisioned_file: Annotated[
        Path | None,
        typer.Option(
            "--provisioned-file",
            help="File of provisioned AppX package names, one per line. Remove only.",
        ),
    ] = None,
    registry_file: Annotated[
        Path | None,
        typer.Option(
            "--registry-file",
            help="CSV file of registry values: Path,Name,Type,Value (no header).",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", "-l", help="Run log path (default: temp directory)."),
    ] = None,
    silent: Annotated[
        bool,
        typer.Option("--silent", "-s", help="Do not echo log entries to the console."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Log what would be done without making changes."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Configuration file to use."),
    ] = None,
) -> None:
    """Add or remove listed items on this machine.

    Exactly one of --add or --remove is required, together with at least
    one item file. Every item is processed independently: a failing item
    is logged and the run continues with the next one.

    Examples:
        wincfg apply --add --winget-file apps.txt
        wincfg apply --remove --package-file bloat.txt --provisioned-file bloat.txt
        wincfg apply --add --registry-file tweaks.csv --silent
    """
    if ctx.invoked_subcommand is not None:
        return

    # No file may be read before the privilege check, configuration included
    try:
        require_admin()
    except PrivilegeError as e:
        raise _abort(RunLogger(log_file or get_default_log_path()), str(e)) from e

    try:
        config = load_config(config_path)
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=1) from e

    run_log = RunLogger(
        log_file or config.effective_log_file,
        echo=not (silent or config.silent),
    )

    mode = _resolve_mode(add, remove)
    if mode is None:
        raise _abort(run_log, "Specify exactly one of --add or --remove.")

    sources = ItemSources(
        winget=winget_file,
        capability=capability_file,
        optional_feature=feature_file,
        package=package_file,
        provisioned_package=provisioned_file,
        registry=registry_file,
    )
    if sources.is_empty:
        raise _abort(run_log, "No item file given. Supply at least one item file.")

    try:
        items = load_sources(sources)
    except ItemSourceError as e:
        raise _abort(run_log, str(e)) from e

    simulate = dry_run or config.dry_run
    if simulate and run_log.echo:
        print_warning("Dry-run mode: no changes will be made.")
    table = build_operation_table(items, get_operators(dry_run=simulate))

    try:
        run_log.info(
            f"Starting {mode.value} run for {sum(len(b.items) for b in table)} item(s)"
            + (" (dry run)" if simulate else "")
        )
        report = process_batch(mode, table, run_log)
        run_log.info(
            f"Run completed: {report.succeeded} succeeded, "
            f"{report.skipped} skipped, {report.failed} failed"
        )
    except LogWriteError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if run_log.echo:
        _print_report(report)
        print_info(f"Log written to {run_log.log_path}")

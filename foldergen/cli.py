"""
Command line entry point.

    foldergen generate ./Assets --root Client --categories Images,Scripts
    foldergen list
    foldergen gui
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from typing_extensions import Annotated

from foldergen.config import APP_NAME, APP_VERSION, DEFAULT_PLACEHOLDER_NAME, settings_path
from foldergen.core.catalog import category_names, iter_catalog, parse_categories
from foldergen.core.planner import build_scaffold_plan
from foldergen.core.scaffold import scaffold
from foldergen.core.settings import (
    SettingsError,
    default_settings,
    load_settings_or_default,
    save_settings,
    settings_for,
)
from foldergen.logging_setup import setup_logging

app = typer.Typer(
    help=f"{APP_NAME}: create a fixed project folder skeleton.",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"foldergen {APP_VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version and exit."),
    ] = None,
) -> None:
    pass


@app.command("generate")
def generate_command(
    base: Annotated[Path, typer.Argument(help="Base asset directory (e.g. ./Assets).")],
    root: Annotated[Optional[str], typer.Option("--root", help="Root folder name; empty for no nesting.")] = None,
    categories: Annotated[
        Optional[str],
        typer.Option("--categories", "-c", help="Comma-separated category names, or 'all'."),
    ] = None,
    placeholder: Annotated[
        Optional[str],
        typer.Option("--placeholder", help=f"Placeholder file name (default {DEFAULT_PLACEHOLDER_NAME}); empty disables."),
    ] = None,
    no_placeholder: Annotated[bool, typer.Option("--no-placeholder", help="Do not create placeholder files.")] = False,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Print the plan without touching the disk.")] = False,
    settings_file: Annotated[
        Optional[Path],
        typer.Option("--settings", help="JSON settings file providing defaults for omitted options."),
    ] = None,
    save: Annotated[bool, typer.Option("--save-settings", help="Write the effective options to the settings file.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every created folder.")] = False,
) -> None:
    """Create the folder skeleton under BASE."""
    setup_logging(verbose)

    try:
        defaults = load_settings_or_default(settings_file) if settings_file else default_settings()
    except SettingsError as e:
        raise typer.BadParameter(str(e), param_hint="--settings")

    root_folder = (defaults.root_folder if root is None else root).strip()

    if categories is None:
        selected = defaults.selected
    else:
        try:
            selected = parse_categories(categories)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--categories")

    if no_placeholder:
        placeholder_enabled, placeholder_name = False, defaults.placeholder_name
    elif placeholder is not None:
        placeholder_enabled, placeholder_name = bool(placeholder.strip()), placeholder.strip()
    else:
        placeholder_enabled, placeholder_name = defaults.placeholder_enabled, defaults.placeholder_name

    effective = settings_for(root_folder, selected, placeholder_enabled, placeholder_name)
    placeholder_arg = effective.effective_placeholder

    if dry_run:
        plan = build_scaffold_plan(str(base), root_folder, selected, placeholder_arg)
        if not plan:
            typer.echo("Nothing selected; no changes.")
            return
        for item in plan:
            typer.echo(f"[{item.kind}] {item.path}")
        typer.echo(f"{len(plan)} action(s) planned.")
        return

    result = scaffold(str(base), root_folder, selected, placeholder_arg)

    if not result.ok:
        typer.echo(f"Error: {result.describe()}", err=True)
        raise typer.Exit(code=1)

    if result.status == "noop":
        typer.echo("Nothing selected; no changes.")
    else:
        typer.echo(
            f"Success: {', '.join(category_names(selected))} "
            f"({len(result.created_dirs)} folder(s), {len(result.created_files)} placeholder(s) created)"
        )

    if save:
        target = settings_file or settings_path()
        written = save_settings(effective, target)
        typer.echo(f"Settings saved: {written}")


@app.command("list")
def list_command() -> None:
    """Show the folder catalog."""
    table = Table(title="Folder catalog")
    table.add_column("Category")
    table.add_column("Subfolders")
    table.add_column("Placement")

    for entry in iter_catalog():
        table.add_row(
            entry.folder,
            ", ".join(entry.subfolders) or "-",
            "base folder" if entry.root_only else "root folder",
        )

    Console().print(table)


@app.command("gui")
def gui_command() -> None:
    """Open the desktop window."""
    # Qt is only needed for this command.
    from foldergen.ui.main_window import run_app

    raise typer.Exit(code=run_app())


if __name__ == "__main__":
    app()

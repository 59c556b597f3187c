"""Settings commands.

Provides commands to show the effective settings, write a default
settings file, and print where the settings file lives.
"""

import json
from typing import Annotated

import typer
from rich.table import Table

from safefs.cli.types import OutputFormat, get_config_path, get_settings
from safefs.core.paths import get_settings_path
from safefs.core.settings import FilesystemSettings, SettingsError, save_settings
from safefs.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Show and create safefs settings.",
    no_args_is_help=True,
)


@app.command()
def show(
    ctx: typer.Context,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show the effective settings."""
    settings = get_settings(ctx)
    data = settings.model_dump()
    data["directory_mode"] = f"{settings.directory_mode:#o}"

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(data))
        return

    table = Table(title="safefs settings", show_header=False, border_style="border")
    table.add_column("Setting", style="muted")
    table.add_column("Value", style="text")
    for key, value in data.items():
        table.add_row(key, "-" if value is None else str(value))
    console.print(table)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file with the default values."""
    path = get_config_path(ctx) or get_settings_path()

    if path.exists() and not force:
        print_warning(f"Settings file already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_settings(FilesystemSettings(), path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {saved}")


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the settings file location."""
    typer.echo(str(get_config_path(ctx) or get_settings_path()))

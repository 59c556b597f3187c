"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from safefs import __version__
from safefs.cli.commands import config, fs, path
from safefs.core.settings import SettingsError, load_settings_or_default
from safefs.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="safefs",
    help="Filesystem operations with typed failures.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"safefs version {__version__}")
        raise typer.Exit()


def _configure_logging(config_path: Path | None, verbose: bool, quiet: bool) -> None:
    """Route library logging to stderr through Rich.

    --verbose wins over --quiet, which wins over the configured log_level.
    An unreadable settings file falls back to WARNING here; the command
    itself reports the settings error.
    """
    if verbose:
        level = "DEBUG"
    elif quiet:
        level = "ERROR"
    else:
        try:
            level = load_settings_or_default(config_path).log_level
        except SettingsError:
            level = "WARNING"

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
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
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Settings file (default: ~/.config/safefs/config.toml).",
        ),
    ] = None,
) -> None:
    """safefs - Filesystem operations with typed failures.

    Inspect, walk and modify files, directories and symbolic links.
    Every failure is reported with the name of its error kind.
    """
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path

    _configure_logging(config_path, verbose, quiet)


# Register commands
app.add_typer(path.app, name="path")
app.add_typer(fs.app, name="fs")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()

"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

import json
from enum import Enum
from pathlib import Path
from typing import NoReturn

import typer

from safefs.core.errors import FilesystemError
from safefs.core.settings import FilesystemSettings, SettingsError, load_settings_or_default
from safefs.filesystem.models import TraversalEntry
from safefs.filesystem.operations import Filesystem
from safefs.utils.formatting import console, create_entry_table, print_error


class OutputFormat(str, Enum):
    """Output format options for listing commands."""

    TABLE = "table"
    JSON = "json"


def get_config_path(ctx: typer.Context) -> Path | None:
    """Get the settings file path selected with --config, if any."""
    obj = ctx.obj or {}
    return obj.get("config_path")


def get_settings(ctx: typer.Context) -> FilesystemSettings:
    """Load the settings for the current invocation.

    Exits with code 1 if the settings file exists but is invalid.
    """
    try:
        return load_settings_or_default(get_config_path(ctx))
    except SettingsError as e:
        print_error(f"Failed to load settings: {e}")
        raise typer.Exit(code=1) from e


def get_filesystem(ctx: typer.Context) -> Filesystem:
    """Build a Filesystem configured for the current invocation."""
    return Filesystem(get_settings(ctx))


def exit_with_error(error: FilesystemError) -> NoReturn:
    """Report a filesystem error and exit with code 1."""
    print_error(f"{type(error).__name__}: {error}")
    raise typer.Exit(code=1) from error


def print_entries(title: str, entries: list[TraversalEntry], output_format: OutputFormat) -> None:
    """Display traversal entries as a Rich table or as JSON."""
    if output_format == OutputFormat.JSON:
        data = [{"path": e.path.value, "kind": e.kind.value} for e in entries]
        console.print_json(json.dumps(data))
        return
    console.print(create_entry_table(title, entries))

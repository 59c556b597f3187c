"""Read-only path inspection commands.

Provides commands to classify a path, compute relative paths, list
directories, and walk or search directory trees.
"""

import json
from typing import Annotated

import typer
from rich.table import Table

from safefs.cli.types import (
    OutputFormat,
    exit_with_error,
    get_filesystem,
    print_entries,
)
from safefs.core.errors import FilesystemError
from safefs.filesystem.models import PathKind
from safefs.filesystem.operations import Filesystem
from safefs.utils.formatting import console, format_kind, print_info

app = typer.Typer(
    help="Inspect paths and directory trees.",
    no_args_is_help=True,
)

FormatOption = Annotated[
    OutputFormat,
    typer.Option(
        "--format",
        "-f",
        help="Output format.",
        case_sensitive=False,
    ),
]


@app.command()
def info(
    ctx: typer.Context,
    target: Annotated[str, typer.Argument(help="Path to inspect.")],
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """Show what a path is and its metadata."""
    filesystem = get_filesystem(ctx)

    try:
        details = _collect_info(filesystem, target)
    except FilesystemError as e:
        exit_with_error(e)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(details))
        return

    table = Table(title=target, show_header=False, border_style="border")
    table.add_column("Field", style="muted")
    table.add_column("Value", style="text", overflow="fold")
    for key, value in details.items():
        shown = format_kind(PathKind(value)) if key == "kind" else str(value)
        table.add_row(key, shown)
    console.print(table)


@app.command()
def relative(
    ctx: typer.Context,
    origin: Annotated[str, typer.Argument(help="Path to start from.")],
    target: Annotated[str, typer.Argument(help="Path to reach.")],
) -> None:
    """Print the relative path leading from ORIGIN to TARGET."""
    filesystem = get_filesystem(ctx)

    try:
        typer.echo(filesystem.relative(origin, target))
    except FilesystemError as e:
        exit_with_error(e)


@app.command("ls")
def list_directory(
    ctx: typer.Context,
    directory: Annotated[str, typer.Argument(help="Directory to list.")],
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """List the immediate children of a directory."""
    filesystem = get_filesystem(ctx)

    try:
        entries = filesystem.list_directory(directory)
    except FilesystemError as e:
        exit_with_error(e)

    print_entries(directory, entries, output_format)


@app.command()
def tree(
    ctx: typer.Context,
    directory: Annotated[str, typer.Argument(help="Root of the tree.")],
    leaves: Annotated[
        bool,
        typer.Option("--leaves", help="Only show files and links."),
    ] = False,
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """Walk a directory tree, children before their parent."""
    filesystem = get_filesystem(ctx)

    try:
        entries = list(filesystem.walk(directory, leaves_only=leaves))
    except FilesystemError as e:
        exit_with_error(e)

    if not entries and output_format == OutputFormat.TABLE:
        print_info(f"Directory is empty: {directory}")
        return

    print_entries(directory, entries, output_format)


@app.command()
def find(
    ctx: typer.Context,
    directory: Annotated[str, typer.Argument(help="Root of the search.")],
    pattern: Annotated[str, typer.Argument(help="Regular expression matched against paths.")],
    leaves: Annotated[
        bool,
        typer.Option("--leaves", help="Only match files and links."),
    ] = False,
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """Search a directory tree for paths matching a regular expression."""
    filesystem = get_filesystem(ctx)

    try:
        entries = filesystem.find(directory, pattern, leaves_only=leaves)
    except FilesystemError as e:
        exit_with_error(e)

    if not entries and output_format == OutputFormat.TABLE:
        print_info("No matching paths found.")
        return

    print_entries(f"Matches for {pattern}", entries, output_format)


# === Private helper functions ===


def _collect_info(filesystem: Filesystem, target: str) -> dict[str, str | int | bool]:
    """Gather the metadata shown by `safefs path info`."""
    kind = filesystem.classify(target)
    details: dict[str, str | int | bool] = {"path": target, "kind": kind.value}

    if kind is PathKind.MISSING:
        return details

    if kind is PathKind.LINK:
        details["link_target"] = filesystem.link_target(target)
        if filesystem.missing(target):
            # Dangling link: nothing more to stat
            return details

    details["realpath"] = filesystem.realpath(target)
    details["size"] = filesystem.size(target)
    details["permissions"] = filesystem.permissions(target)
    details["readable"] = filesystem.is_readable(target)
    details["writable"] = filesystem.is_writable(target)
    details["executable"] = filesystem.is_executable(target)
    details["last_modified"] = filesystem.last_modified_time(target)
    return details

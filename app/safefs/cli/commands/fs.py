"""Filesystem modification commands.

Provides commands to read, write, create, copy, move, link, chmod and
delete paths. Destructive commands ask for confirmation unless --yes.
"""

from typing import Annotated

import typer

from safefs.cli.types import exit_with_error, get_filesystem
from safefs.core.errors import FilesystemError
from safefs.utils.formatting import print_info, print_success

app = typer.Typer(
    help="Create, change and delete files, directories and links.",
    no_args_is_help=True,
)

YesOption = Annotated[
    bool,
    typer.Option("--yes", "-y", help="Skip confirmation prompt."),
]


def _parse_mode(mode: str) -> int:
    """Parse an octal mode string such as "755" or "0o755"."""
    try:
        return int(mode.strip().lower().removeprefix("0o"), 8)
    except ValueError as e:
        raise typer.BadParameter(f"Not an octal mode: {mode}") from e


@app.command()
def cat(
    ctx: typer.Context,
    target: Annotated[str, typer.Argument(help="File to print.")],
) -> None:
    """Print the contents of a file."""
    filesystem = get_filesystem(ctx)

    try:
        contents = filesystem.read(target)
    except FilesystemError as e:
        exit_with_error(e)

    typer.echo(contents, nl=False)


@app.command()
def write(
    ctx: typer.Context,
    target: Annotated[str, typer.Argument(help="File to write.")],
    text: Annotated[str, typer.Argument(help="New contents.")],
) -> None:
    """Replace the contents of a file, creating it if needed."""
    filesystem = get_filesystem(ctx)

    try:
        written = filesystem.write(target, text)
    except FilesystemError as e:
        exit_with_error(e)

    print_success(f"Wrote {written} bytes to {target}")


@app.command()
def append(
    ctx: typer.Context,
    target: Annotated[str, typer.Argument(help="File to extend.")],
    text: Annotated[str, typer.Argument(help="Text to add at the end.")],
) -> None:
    """Add text to the end of a file."""
    filesystem = get_filesystem(ctx)

    try:
        written = filesystem.append(target, text)
    except FilesystemError as e:
        exit_with_error(e)

    print_success(f"{target} now holds {written} bytes")


@app.command()
def prepend(
    ctx: typer.Context,
    target: Annotated[str, typer.Argument(help="File to extend.")],
    text: Annotated[str, typer.Argument(help="Text to add at the beginning.")],
) -> None:
    """Add text to the beginning of a file."""
    filesystem = get_filesystem(ctx)

    try:
        written = filesystem.prepend(target, text)
    except FilesystemError as e:
        exit_with_error(e)

    print_success(f"{target} now holds {written} bytes")


@app.command()
def touch(
    ctx: typer.Context,
    target: Annotated[str, typer.Argument(help="File to create.")],
) -> None:
    """Create an empty file (and its parent directory)."""
    filesystem = get_filesystem(ctx)

    try:
        filesystem.touch(target)
    except FilesystemError as e:
        exit_with_error(e)

    print_success(f"Created {target}")


@app.command()
def mkdir(
    ctx: typer.Context,
    target: Annotated[str, typer.Argument(help="Directory to create.")],
    mode: Annotated[
        str | None,
        typer.Option("--mode", "-m", help="Octal mode (default from settings)."),
    ] = None,
) -> None:
    """Create a directory and any missing parents."""
    filesystem = get_filesystem(ctx)
    dir_mode = _parse_mode(mode) if mode is not None else None

    try:
        filesystem.create_directory(target, dir_mode)
    except FilesystemError as e:
        exit_with_error(e)

    print_success(f"Created {target}")


@app.command("cp")
def copy(
    ctx: typer.Context,
    source: Annotated[str, typer.Argument(help="File to copy.")],
    destination: Annotated[str, typer.Argument(help="New file (must not exist).")],
) -> None:
    """Copy a file byte for byte."""
    filesystem = get_filesystem(ctx)

    try:
        filesystem.copy(source, destination)
    except FilesystemError as e:
        exit_with_error(e)

    print_success(f"Copied {source} to {destination}")


@app.command("mv")
def move(
    ctx: typer.Context,
    source: Annotated[str, typer.Argument(help="Path to move.")],
    destination: Annotated[str, typer.Argument(help="New path (must not exist).")],
) -> None:
    """Rename a path."""
    filesystem = get_filesystem(ctx)

    try:
        filesystem.move(source, destination)
    except FilesystemError as e:
        exit_with_error(e)

    print_success(f"Moved {source} to {destination}")


@app.command("ln")
def link(
    ctx: typer.Context,
    target: Annotated[str, typer.Argument(help="Path the link points to.")],
    name: Annotated[str, typer.Argument(help="Link to create.")],
) -> None:
    """Create a symbolic link NAME pointing to TARGET."""
    filesystem = get_filesystem(ctx)

    try:
        filesystem.symlink(target, name)
    except FilesystemError as e:
        exit_with_error(e)

    print_success(f"Linked {name} -> {target}")


@app.command()
def chmod(
    ctx: typer.Context,
    mode: Annotated[str, typer.Argument(help="Octal mode, e.g. 644.")],
    target: Annotated[str, typer.Argument(help="Path to change.")],
) -> None:
    """Change the permission bits of a path."""
    filesystem = get_filesystem(ctx)
    file_mode = _parse_mode(mode)

    try:
        filesystem.chmod(target, file_mode)
        permissions = filesystem.permissions(target)
    except FilesystemError as e:
        exit_with_error(e)

    print_success(f"{target} is now {permissions}")


@app.command("rm")
def remove(
    ctx: typer.Context,
    target: Annotated[str, typer.Argument(help="Path to delete.")],
    yes: YesOption = False,
) -> None:
    """Delete a file, a link (not its target) or a whole directory tree."""
    filesystem = get_filesystem(ctx)

    try:
        kind = filesystem.classify(filesystem.path(target))
    except FilesystemError as e:
        exit_with_error(e)

    if not yes:
        confirmed = typer.confirm(f"Delete {kind.value} {target}?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    try:
        filesystem.delete(target)
    except FilesystemError as e:
        exit_with_error(e)

    print_success(f"Deleted {target}")


@app.command()
def clean(
    ctx: typer.Context,
    directory: Annotated[str, typer.Argument(help="Directory to empty.")],
    yes: YesOption = False,
) -> None:
    """Delete everything inside a directory, keeping the directory."""
    filesystem = get_filesystem(ctx)

    if not yes:
        confirmed = typer.confirm(f"Delete everything inside {directory}?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    try:
        filesystem.clean_directory(directory)
    except FilesystemError as e:
        exit_with_error(e)

    print_success(f"Cleaned {directory}")

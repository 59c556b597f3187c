"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from safefs.filesystem.models import PathKind, TraversalEntry

_STYLES: dict[str, str] = {
    "text": "#ffffff",
    "muted": "#b2bec3",
    "header": "bold #69B9A1",
    "border": "#29526d",
    "success": "#03b971",
    "warning": "#f5b332",
    "error": "bold #f53263",
    "info": "#0ec1c8",
    # Path kinds
    "kind.file": "#ffffff",
    "kind.directory": "bold #69B9A1",
    "kind.link": "#0e8ac8",
    "kind.missing": "#b2bec3",
}

THEME = Theme(_STYLES)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def format_kind(kind: PathKind) -> str:
    """Format a path kind with its color markup."""
    return f"[kind.{kind.value}]{kind.value}[/]"


def create_entry_table(title: str, entries: list[TraversalEntry]) -> Table:
    """Create a table listing traversal entries in the given order.

    Args:
        title: Table title.
        entries: Entries to show, one row each.

    Returns:
        Rich Table with an order column, the kind and the path.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="header",
        border_style="border",
    )
    table.add_column("#", style="muted", justify="right")
    table.add_column("Kind", width=10)
    table.add_column("Path", style="text", overflow="fold")

    for index, entry in enumerate(entries, start=1):
        table.add_row(str(index), format_kind(entry.kind), entry.path.value)
    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")

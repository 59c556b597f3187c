"""CLI package for safefs.

This package contains the Typer application and all subcommands.
"""

from safefs.cli.main import app

__all__ = ["app"]

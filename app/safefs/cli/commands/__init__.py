"""CLI commands for safefs.

This package contains all subcommand implementations.
"""

from safefs.cli.commands import config, fs, path

__all__ = ["config", "fs", "path"]

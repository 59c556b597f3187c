"""XDG-compliant path management for safefs.

This module provides the standardized location of the settings file,
following the XDG Base Directory Specification.

XDG defaults:
- Config: ~/.config/safefs/
"""

import os
from pathlib import Path

from safefs.core.errors import FailedToCreateDirectoryError

# Application identifier for directory naming
APP_NAME = "safefs"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/safefs/ (or XDG_CONFIG_HOME/safefs/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_settings_path() -> Path:
    """Get the default settings file path.

    Returns:
        Path to ~/.config/safefs/config.toml.
    """
    return get_config_dir() / "config.toml"


def ensure_config_dir() -> Path:
    """Create the configuration directory if it doesn't exist.

    Returns:
        Path to the configuration directory.

    Raises:
        FailedToCreateDirectoryError: If the directory cannot be created.
    """
    path = get_config_dir()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create config directory {path}: Permission denied"
        raise FailedToCreateDirectoryError(msg) from e
    except OSError as e:
        msg = f"Cannot create config directory {path}: {e}"
        raise FailedToCreateDirectoryError(msg) from e
    return path

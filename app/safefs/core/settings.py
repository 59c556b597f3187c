"""Filesystem settings and their TOML persistence.

Settings control how a Filesystem instance encodes text, which mode new
directories get, where temporary entries are created, and how verbose
the command line front end logs.

Settings are stored in ~/.config/safefs/config.toml
"""

import codecs
import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from safefs.core.errors import FilesystemError
from safefs.core.paths import get_settings_path

logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

DEFAULT_DIRECTORY_MODE = 0o777


class FilesystemSettings(BaseModel):
    """Configuration for a Filesystem instance.

    Attributes:
        encoding: Text encoding used by read/write/append/prepend.
        directory_mode: Permission bits for newly created directories.
        temporary_directory: Directory for temporary entries (None = system default).
        temporary_prefix: Name prefix for temporary files and directories.
        log_level: Log level used by the command line front end.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    encoding: Annotated[
        str,
        Field(min_length=1, description="Text encoding for file contents"),
    ] = "utf-8"
    directory_mode: Annotated[
        int,
        Field(ge=0, le=0o7777, description="Mode for new directories"),
    ] = DEFAULT_DIRECTORY_MODE
    temporary_directory: Annotated[
        str | None,
        Field(description="Temporary directory (None = system default)"),
    ] = None
    temporary_prefix: Annotated[
        str,
        Field(description="Prefix for temporary files and directories"),
    ] = "safefs-"
    log_level: Annotated[
        LogLevel,
        Field(description="Log level for the command line front end"),
    ] = "WARNING"

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate that the encoding is known to the codecs registry."""
        try:
            codecs.lookup(v)
        except LookupError:
            msg = f"Unknown encoding: {v}"
            raise ValueError(msg) from None
        return v

    @field_validator("directory_mode", mode="before")
    @classmethod
    def parse_octal_mode(cls, v: object) -> object:
        """Accept octal strings such as "755" or "0o755"."""
        if isinstance(v, str):
            text = v.strip().lower().removeprefix("0o")
            try:
                return int(text, 8)
            except ValueError:
                msg = f"directory_mode must be an octal mode, got '{v}'"
                raise ValueError(msg) from None
        return v


class SettingsError(FilesystemError):
    """Base exception for settings errors."""


class SettingsNotFoundError(SettingsError):
    """Raised when the settings file is not found."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> FilesystemSettings:
    """Load settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default settings path.

    Returns:
        Validated FilesystemSettings object.

    Raises:
        SettingsNotFoundError: If the settings file doesn't exist.
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        raise SettingsNotFoundError(f"Settings file not found: {settings_path}")

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return FilesystemSettings.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def load_settings_or_default(path: Path | None = None) -> FilesystemSettings:
    """Load settings, falling back to defaults when no file exists.

    Args:
        path: Path to the settings file. If None, uses the default settings path.

    Returns:
        Loaded settings, or default settings if the file is missing.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    try:
        return load_settings(path)
    except SettingsNotFoundError:
        logger.debug("No settings file at %s, using defaults", path or get_settings_path())
        return FilesystemSettings()


def save_settings(settings: FilesystemSettings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        settings: The FilesystemSettings object to save.
        path: Path to save the settings. If None, uses the default settings path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()

    data = _settings_to_dict(settings)

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        # Write atomically using a temporary file in the same directory
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path


def _settings_to_dict(settings: FilesystemSettings) -> dict[str, object]:
    """Convert settings to a dictionary for TOML serialization.

    Only includes values that differ from the defaults, except encoding,
    which is always written so the file is never empty.

    Args:
        settings: The FilesystemSettings to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result: dict[str, object] = {"encoding": settings.encoding}

    if settings.directory_mode != DEFAULT_DIRECTORY_MODE:
        result["directory_mode"] = f"{settings.directory_mode:#o}"

    if settings.temporary_directory is not None:
        result["temporary_directory"] = settings.temporary_directory

    if settings.temporary_prefix != "safefs-":
        result["temporary_prefix"] = settings.temporary_prefix

    if settings.log_level != "WARNING":
        result["log_level"] = settings.log_level

    return result

"""Unit tests for config CLI commands.

Tests for the safefs config show, init and path commands.
"""

import json
import tomllib
from pathlib import Path

from safefs.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigShow:
    """Tests for safefs config show command."""

    def test_defaults_json(self) -> None:
        """Without a settings file the defaults are shown."""
        result = runner.invoke(app, ["config", "show", "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["encoding"] == "utf-8"
        assert data["directory_mode"] == "0o777"
        assert data["temporary_directory"] is None

    def test_custom_file(self, tmp_path: Path) -> None:
        config = tmp_path / "config.toml"
        config.write_text('directory_mode = "750"\nlog_level = "INFO"\n')

        result = runner.invoke(app, ["-c", str(config), "config", "show", "-f", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["directory_mode"] == "0o750"
        assert data["log_level"] == "INFO"

    def test_table(self) -> None:
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "encoding" in result.output

    def test_invalid_file(self, tmp_path: Path) -> None:
        """An invalid settings file is reported and exits with 1."""
        config = tmp_path / "config.toml"
        config.write_text("encoding = ")

        result = runner.invoke(app, ["-c", str(config), "config", "show"])

        assert result.exit_code == 1
        assert "Failed to load settings" in result.output


class TestConfigInit:
    """Tests for safefs config init command."""

    def test_init_writes_defaults(self, tmp_path: Path) -> None:
        config = tmp_path / "config.toml"

        result = runner.invoke(app, ["-c", str(config), "config", "init"])

        assert result.exit_code == 0
        with open(config, "rb") as f:
            assert tomllib.load(f) == {"encoding": "utf-8"}

    def test_init_refuses_overwrite(self, tmp_path: Path) -> None:
        config = tmp_path / "config.toml"
        config.write_text('encoding = "latin-1"\n')

        result = runner.invoke(app, ["-c", str(config), "config", "init"])

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert "latin-1" in config.read_text()

    def test_init_force(self, tmp_path: Path) -> None:
        config = tmp_path / "config.toml"
        config.write_text('encoding = "latin-1"\n')

        result = runner.invoke(app, ["-c", str(config), "config", "init", "--force"])

        assert result.exit_code == 0
        assert "utf-8" in config.read_text()

    def test_init_default_location(self, isolated_config_home: Path) -> None:
        """Without --config, the XDG settings file is created."""
        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        assert (isolated_config_home / "safefs" / "config.toml").exists()


class TestConfigPath:
    """Tests for safefs config path command."""

    def test_default_path(self, isolated_config_home: Path) -> None:
        result = runner.invoke(app, ["config", "path"])

        assert result.exit_code == 0
        assert result.output.strip() == str(isolated_config_home / "safefs" / "config.toml")

    def test_explicit_path(self, tmp_path: Path) -> None:
        config = tmp_path / "custom.toml"

        result = runner.invoke(app, ["--config", str(config), "config", "path"])

        assert result.exit_code == 0
        assert result.output.strip() == str(config)

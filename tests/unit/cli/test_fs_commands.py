"""Unit tests for fs CLI commands.

Tests for the safefs fs commands that read, create, change and delete paths.
"""

import os
from pathlib import Path

import pytest
from safefs.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestFsReadWrite:
    """Tests for safefs fs cat, write, append and prepend."""

    def test_cat(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["fs", "cat", str(sample_tree / "a.txt")])

        assert result.exit_code == 0
        assert result.output == "alpha"

    def test_cat_missing(self, tmp_path: Path) -> None:
        """A missing file is reported with its error kind."""
        result = runner.invoke(app, ["fs", "cat", str(tmp_path / "nope")])

        assert result.exit_code == 1
        assert "FileDoesNotExistError" in result.output

    def test_write_creates_file(self, tmp_path: Path) -> None:
        target = tmp_path / "sub" / "f.txt"

        result = runner.invoke(app, ["fs", "write", str(target), "hello"])

        assert result.exit_code == 0
        assert "Wrote 5 bytes" in result.output
        assert target.read_text() == "hello"

    def test_append_and_prepend(self, tmp_path: Path) -> None:
        target = tmp_path / "f.txt"
        target.write_text("mid")

        appended = runner.invoke(app, ["fs", "append", str(target), "-end"])
        prepended = runner.invoke(app, ["fs", "prepend", str(target), "start-"])

        assert appended.exit_code == 0
        assert prepended.exit_code == 0
        assert target.read_text() == "start-mid-end"

    def test_write_uses_configured_encoding(self, tmp_path: Path) -> None:
        """--config settings apply to the command."""
        config = tmp_path / "config.toml"
        config.write_text('encoding = "latin-1"\n')
        target = tmp_path / "f.txt"

        result = runner.invoke(app, ["--config", str(config), "fs", "write", str(target), "é"])

        assert result.exit_code == 0
        assert target.read_bytes() == b"\xe9"


class TestFsCreate:
    """Tests for safefs fs touch, mkdir and ln."""

    def test_touch(self, tmp_path: Path) -> None:
        target = tmp_path / "new.txt"

        result = runner.invoke(app, ["fs", "touch", str(target)])

        assert result.exit_code == 0
        assert target.exists()

    def test_touch_existing(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["fs", "touch", str(sample_tree / "a.txt")])

        assert result.exit_code == 1
        assert "FileAlreadyExistsError" in result.output

    def test_mkdir_with_mode(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b"

        result = runner.invoke(app, ["fs", "mkdir", str(target), "--mode", "700"])

        assert result.exit_code == 0
        assert target.is_dir()
        assert oct(target.stat().st_mode & 0o777) == "0o700"

    def test_mkdir_existing(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["fs", "mkdir", str(tmp_path)])

        assert result.exit_code == 1
        assert "DirectoryAlreadyExistsError" in result.output

    def test_mkdir_invalid_mode(self, tmp_path: Path) -> None:
        """A non-octal mode is a usage error."""
        result = runner.invoke(app, ["fs", "mkdir", str(tmp_path / "x"), "--mode", "rwx"])

        assert result.exit_code == 2
        assert not (tmp_path / "x").exists()

    def test_ln(self, sample_tree: Path) -> None:
        link = sample_tree / "b-link"

        result = runner.invoke(app, ["fs", "ln", str(sample_tree / "b"), str(link)])

        assert result.exit_code == 0
        assert link.is_symlink()


class TestFsCopyMove:
    """Tests for safefs fs cp, mv and chmod."""

    def test_cp(self, sample_tree: Path) -> None:
        destination = sample_tree / "copy.txt"

        result = runner.invoke(app, ["fs", "cp", str(sample_tree / "a.txt"), str(destination)])

        assert result.exit_code == 0
        assert destination.read_text() == "alpha"

    def test_cp_existing_destination(self, sample_tree: Path) -> None:
        result = runner.invoke(
            app, ["fs", "cp", str(sample_tree / "a.txt"), str(sample_tree / "b" / "c.txt")]
        )

        assert result.exit_code == 1
        assert "DestinationAlreadyExistsError" in result.output

    def test_mv(self, sample_tree: Path) -> None:
        result = runner.invoke(
            app, ["fs", "mv", str(sample_tree / "a.txt"), str(sample_tree / "z.txt")]
        )

        assert result.exit_code == 0
        assert (sample_tree / "z.txt").read_text() == "alpha"

    def test_mv_missing(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["fs", "mv", str(tmp_path / "x"), str(tmp_path / "y")])

        assert result.exit_code == 1
        assert "ShouldNotHappenError" in result.output

    def test_chmod(self, sample_tree: Path) -> None:
        target = sample_tree / "a.txt"

        result = runner.invoke(app, ["fs", "chmod", "600", str(target)])

        assert result.exit_code == 0
        assert "600" in result.output
        assert target.stat().st_mode & 0o777 == 0o600


class TestFsDelete:
    """Tests for safefs fs rm and clean."""

    def test_rm_confirmed(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["fs", "rm", str(sample_tree / "b")], input="y\n")

        assert result.exit_code == 0
        assert not (sample_tree / "b").exists()

    def test_rm_declined(self, sample_tree: Path) -> None:
        """Declining the prompt leaves the path in place."""
        result = runner.invoke(app, ["fs", "rm", str(sample_tree / "b")], input="n\n")

        assert result.exit_code == 0
        assert "Aborted" in result.output
        assert (sample_tree / "b").is_dir()

    def test_rm_link_with_yes(self, sample_tree: Path) -> None:
        """--yes skips the prompt; a link is removed without its target."""
        result = runner.invoke(app, ["fs", "rm", "--yes", str(sample_tree / "link")])

        assert result.exit_code == 0
        assert not os.path.lexists(sample_tree / "link")
        assert (sample_tree / "a.txt").exists()

    def test_rm_missing(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["fs", "rm", "-y", str(tmp_path / "nope")])

        assert result.exit_code == 1
        assert "FileDoesNotExistError" in result.output

    def test_rm_blank_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A blank path is refused and the working directory survives."""
        work = tmp_path / "work"
        work.mkdir()
        (work / "precious.txt").write_text("keep")
        monkeypatch.chdir(work)

        result = runner.invoke(app, ["fs", "rm", "", "--yes"])

        assert result.exit_code == 1
        assert "InvalidPathError" in result.output
        assert (work / "precious.txt").read_text() == "keep"

    def test_clean(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["fs", "clean", "--yes", str(sample_tree)])

        assert result.exit_code == 0
        assert sample_tree.is_dir()
        assert list(sample_tree.iterdir()) == []

    def test_clean_not_a_directory(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["fs", "clean", "-y", str(sample_tree / "a.txt")])

        assert result.exit_code == 1
        assert "InvalidDirectoryPathError" in result.output

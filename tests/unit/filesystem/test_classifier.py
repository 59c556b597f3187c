"""Unit tests for PathClassifier."""

import errno
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from safefs.core.errors import FilesystemError
from safefs.filesystem.classifier import PathClassifier
from safefs.filesystem.models import FilesystemPath, PathKind


@pytest.fixture
def classifier() -> PathClassifier:
    return PathClassifier()


class TestPredicates:
    """Tests for the existence and type predicates."""

    def test_file(self, classifier: PathClassifier, tmp_path: Path) -> None:
        """A regular file exists and is a file."""
        target = tmp_path / "f.txt"
        target.write_text("x")

        assert classifier.exists(target)
        assert not classifier.missing(target)
        assert classifier.is_file(target)
        assert not classifier.is_directory(target)
        assert not classifier.is_link(target)

    def test_directory(self, classifier: PathClassifier, tmp_path: Path) -> None:
        """A directory exists and is a directory."""
        assert classifier.exists(tmp_path)
        assert classifier.is_directory(tmp_path)
        assert not classifier.is_file(tmp_path)

    def test_missing(self, classifier: PathClassifier, tmp_path: Path) -> None:
        """A missing path is reported, not raised."""
        target = tmp_path / "nothing"

        assert classifier.missing(target)
        assert not classifier.exists(target)
        assert not classifier.is_file(target)
        assert not classifier.is_directory(target)
        assert not classifier.is_link(target)

    def test_path_below_a_file_is_missing(
        self, classifier: PathClassifier, tmp_path: Path
    ) -> None:
        """ENOTDIR is treated as missing."""
        target = tmp_path / "f.txt"
        target.write_text("x")

        assert classifier.missing(target / "child")

    def test_link_to_file(self, classifier: PathClassifier, tmp_path: Path) -> None:
        """A link to a file is a link and, followed, a file."""
        target = tmp_path / "f.txt"
        target.write_text("x")
        link = tmp_path / "l"
        link.symlink_to(target)

        assert classifier.is_link(link)
        assert classifier.is_file(link)
        assert classifier.exists(link)

    def test_dangling_link(self, classifier: PathClassifier, tmp_path: Path) -> None:
        """A dangling link is a link but its target is missing."""
        link = tmp_path / "l"
        link.symlink_to(tmp_path / "gone")

        assert classifier.is_link(link)
        assert classifier.missing(link)
        assert not classifier.is_file(link)

    def test_accepts_filesystem_path(self, classifier: PathClassifier, tmp_path: Path) -> None:
        """Predicates accept FilesystemPath values."""
        assert classifier.is_directory(FilesystemPath(str(tmp_path)))

    def test_access_checks(self, classifier: PathClassifier, tmp_path: Path) -> None:
        """Access predicates reflect os.access."""
        target = tmp_path / "f.txt"
        target.write_text("x")

        assert classifier.is_readable(target)
        assert classifier.is_writable(target)
        with patch("safefs.filesystem.classifier.os.access", return_value=False):
            assert not classifier.is_readable(target)
            assert not classifier.is_writable(target)
            assert not classifier.is_executable(target)

    def test_system_error_surfaces(self, classifier: PathClassifier, tmp_path: Path) -> None:
        """Errors other than "missing" are raised as FilesystemError."""
        denied = OSError(errno.EACCES, "Permission denied")

        with (
            patch("safefs.filesystem.classifier.os.stat", side_effect=denied),
            pytest.raises(FilesystemError, match="Permission denied"),
        ):
            classifier.exists(tmp_path / "secret")


class TestClassify:
    """Tests for classify method."""

    def test_kinds(self, classifier: PathClassifier, sample_tree: Path) -> None:
        """classify returns the kind of each entry."""
        assert classifier.classify(sample_tree / "a.txt") is PathKind.FILE
        assert classifier.classify(sample_tree / "b") is PathKind.DIRECTORY
        assert classifier.classify(sample_tree / "link") is PathKind.LINK
        assert classifier.classify(sample_tree / "zzz") is PathKind.MISSING

    def test_link_to_directory_is_link(self, classifier: PathClassifier, tmp_path: Path) -> None:
        """A link to a directory is still a LINK."""
        link = tmp_path / "l"
        link.symlink_to(tmp_path, target_is_directory=True)

        assert classifier.classify(link) is PathKind.LINK

    def test_not_cached(self, classifier: PathClassifier, tmp_path: Path) -> None:
        """Classification follows changes on disk."""
        target = tmp_path / "f"
        assert classifier.classify(target) is PathKind.MISSING

        target.write_text("x")
        assert classifier.classify(target) is PathKind.FILE

        os.unlink(target)
        target.mkdir()
        assert classifier.classify(target) is PathKind.DIRECTORY

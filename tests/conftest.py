"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from pathlib import Path

import pytest
from safefs.filesystem.operations import Filesystem


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory for every test."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Restore the root logger's level and handlers after each test."""
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield
    root.setLevel(level)
    root.handlers[:] = handlers


@pytest.fixture
def fs() -> Filesystem:
    """Filesystem with default settings."""
    return Filesystem()


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Small directory tree for traversal and delete tests.

    Layout:
        tree/
            a.txt          "alpha"
            b/
                c.txt      "charlie"
                d/
                    e.txt  "echo"
            link -> a.txt
    """
    root = tmp_path / "tree"
    (root / "b" / "d").mkdir(parents=True)
    (root / "a.txt").write_text("alpha")
    (root / "b" / "c.txt").write_text("charlie")
    (root / "b" / "d" / "e.txt").write_text("echo")
    (root / "link").symlink_to(root / "a.txt")
    return root

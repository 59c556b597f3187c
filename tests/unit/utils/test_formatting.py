"""Unit tests for Rich formatting helpers."""

from safefs.filesystem.models import FilesystemPath, PathKind, TraversalEntry
from safefs.utils.formatting import THEME, create_entry_table, format_kind


class TestFormatKind:
    """Tests for format_kind function."""

    def test_markup_per_kind(self) -> None:
        """Each kind is wrapped in its own theme style."""
        for kind in PathKind:
            assert format_kind(kind) == f"[kind.{kind.value}]{kind.value}[/]"

    def test_theme_has_every_kind(self) -> None:
        for kind in PathKind:
            assert f"kind.{kind.value}" in THEME.styles


class TestCreateEntryTable:
    """Tests for create_entry_table function."""

    def test_one_row_per_entry(self) -> None:
        entries = [
            TraversalEntry(FilesystemPath("/srv/a.txt"), PathKind.FILE),
            TraversalEntry(FilesystemPath("/srv/b"), PathKind.DIRECTORY),
        ]

        table = create_entry_table("/srv", entries)

        assert table.title == "/srv"
        assert table.row_count == 2
        assert [column.header for column in table.columns] == ["#", "Kind", "Path"]

    def test_empty(self) -> None:
        assert create_entry_table("empty", []).row_count == 0

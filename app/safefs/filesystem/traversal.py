"""Recursive directory traversal.

Walks a directory tree depth-first and yields every descendant before
the directory that contains it (child-first), which is the order a
recursive delete needs. Siblings are visited in name order so that a
walk over an unchanged tree is reproducible.
"""

import logging
import os
import re
from collections.abc import Iterator

from safefs.core.errors import InvalidDirectoryPathError
from safefs.filesystem.classifier import PathClassifier
from safefs.filesystem.models import FilesystemPath, PathKind, StrPath, TraversalEntry

logger = logging.getLogger(__name__)


def _entry_kind(entry: os.DirEntry[str]) -> PathKind:
    """Classify a directory entry without following symlinks."""
    if entry.is_symlink():
        return PathKind.LINK
    if entry.is_dir(follow_symlinks=False):
        return PathKind.DIRECTORY
    return PathKind.FILE


def _require_directory(directory: StrPath, classifier: PathClassifier | None) -> str:
    """Return the directory as a string, or fail if it is not a directory."""
    root = os.fspath(directory)
    if not (classifier or PathClassifier()).is_directory(root):
        raise InvalidDirectoryPathError(f"Not a directory: {root}")
    return root


def _scan(directory: str) -> list[TraversalEntry]:
    """Read a whole directory listing, sorted by name.

    The listing is materialized before it is returned, so callers may
    delete entries while iterating over it.
    """
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda e: e.name)
    return [TraversalEntry(FilesystemPath(e.path), _entry_kind(e)) for e in entries]


def list_entries(
    directory: StrPath,
    *,
    classifier: PathClassifier | None = None,
) -> list[TraversalEntry]:
    """List the immediate children of a directory.

    Args:
        directory: Directory to list.
        classifier: Classifier used to validate the directory.

    Returns:
        Entries sorted by name, without "." and "..".

    Raises:
        InvalidDirectoryPathError: If the path is not a directory.
        OSError: If the directory cannot be read.
    """
    return _scan(_require_directory(directory, classifier))


def _walk(directory: str, leaves_only: bool) -> Iterator[TraversalEntry]:
    for entry in _scan(directory):
        if entry.kind is PathKind.DIRECTORY:
            yield from _walk(entry.path.value, leaves_only)
            if leaves_only:
                continue
        yield entry


def walk(
    directory: StrPath,
    *,
    leaves_only: bool = False,
    classifier: PathClassifier | None = None,
) -> Iterator[TraversalEntry]:
    """Walk a directory tree child-first.

    The root is validated before the generator is created, so an invalid
    root fails at call time rather than on the first iteration. The root
    itself is never yielded. Symbolic links are yielded as LINK entries
    and never followed.

    Args:
        directory: Root of the tree to walk.
        leaves_only: If True, yield only files and links.
        classifier: Classifier used to validate the root.

    Returns:
        Iterator of entries, every descendant before its parent.

    Raises:
        InvalidDirectoryPathError: If the root is not a directory.
    """
    root = _require_directory(directory, classifier)
    logger.debug("Walking %s (leaves_only=%s)", root, leaves_only)
    return _walk(root, leaves_only)


def search(
    directory: StrPath,
    pattern: str | re.Pattern[str],
    *,
    leaves_only: bool = False,
    classifier: PathClassifier | None = None,
) -> Iterator[TraversalEntry]:
    """Walk a directory tree and keep entries whose path matches a regex.

    Args:
        directory: Root of the tree to search.
        pattern: Regular expression searched for anywhere in each path.
        leaves_only: If True, only consider files and links.
        classifier: Classifier used to validate the root.

    Returns:
        Iterator of matching entries, in walk order.

    Raises:
        InvalidDirectoryPathError: If the root is not a directory.
        re.error: If the pattern is not a valid regular expression.
    """
    regex = re.compile(pattern)
    entries = walk(directory, leaves_only=leaves_only, classifier=classifier)
    return (entry for entry in entries if regex.search(entry.path.value))

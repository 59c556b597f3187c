"""Filesystem domain models for classification and traversal.

This module defines the core data structures passed between the
classifier, the traversal engine and the Filesystem operations: the
path value object, the kind of entry a path denotes, and the entries
produced while walking a directory tree.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from safefs.core.errors import InvalidPathError

# Anything accepted where a location is expected
StrPath: TypeAlias = str | os.PathLike[str]


class PathKind(str, Enum):
    """Kind of filesystem entry a path currently denotes.

    Derived on demand from the filesystem and never cached, so a value
    is only a snapshot of the state at the time of the call.

    Attributes:
        FILE: Regular file (or any existing non-directory entry).
        DIRECTORY: Directory.
        LINK: Symbolic link, whether or not its target exists.
        MISSING: Nothing exists at the path.
    """

    FILE = "file"
    DIRECTORY = "directory"
    LINK = "link"
    MISSING = "missing"


@dataclass(frozen=True, slots=True)
class FilesystemPath:
    """Immutable, non-empty filesystem location.

    Creating a FilesystemPath performs no I/O. It implements
    os.PathLike, so it can be handed to any Filesystem method or to the
    standard library directly.

    Attributes:
        value: The path string, exactly as given.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate path data after initialization."""
        if not isinstance(self.value, str):
            msg = f"Path must be a string, got {type(self.value).__name__}"
            raise InvalidPathError(msg)
        if not self.value.strip():
            msg = "The path cannot be empty."
            raise InvalidPathError(msg)

    @classmethod
    def new(cls, path: StrPath) -> "FilesystemPath":
        """Create a FilesystemPath from a string or path-like object."""
        if isinstance(path, cls):
            return path
        return cls(os.fspath(path))

    def to_string(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    def __fspath__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class TraversalEntry:
    """A classified path produced while listing or walking a directory.

    Attributes:
        path: Location of the entry.
        kind: Kind of the entry at the time it was listed.
    """

    path: FilesystemPath
    kind: PathKind

    @property
    def name(self) -> str:
        """Final component of the entry's path."""
        return os.path.basename(self.path.value)

"""Filesystem classification, traversal and operations module.

This module provides the path value object, the path classifier, the
relative path resolver, the child-first traversal engine, and the
Filesystem class that combines them into safe operations.
"""

from safefs.filesystem.classifier import PathClassifier
from safefs.filesystem.models import FilesystemPath, PathKind, StrPath, TraversalEntry
from safefs.filesystem.operations import Filesystem
from safefs.filesystem.relative import relative_path
from safefs.filesystem.traversal import list_entries, search, walk

__all__ = [
    "Filesystem",
    "FilesystemPath",
    "PathClassifier",
    "PathKind",
    "StrPath",
    "TraversalEntry",
    "list_entries",
    "relative_path",
    "search",
    "walk",
]

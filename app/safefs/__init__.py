"""safefs - filesystem operations with typed failures.

Wraps file, directory and link operations behind a single Filesystem
interface and reports every failure as a FilesystemError subclass.
"""

from safefs.core.errors import FilesystemError, InvalidPathError, ShouldNotHappenError
from safefs.core.settings import FilesystemSettings
from safefs.filesystem import Filesystem, FilesystemPath, PathKind, TraversalEntry

__version__ = "0.1.0"

__all__ = [
    "Filesystem",
    "FilesystemError",
    "FilesystemPath",
    "FilesystemSettings",
    "InvalidPathError",
    "PathKind",
    "ShouldNotHappenError",
    "TraversalEntry",
    "__version__",
]

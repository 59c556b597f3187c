"""Path classification predicates.

PathClassifier is the single source of truth for deciding what a path
denotes. Every answer is read from the filesystem at call time; nothing
is cached.
"""

import errno
import os
import stat

from safefs.core.safety import safely
from safefs.filesystem.models import PathKind, StrPath

# errno values that mean "nothing is there" rather than "something went wrong"
_MISSING_ERRNOS = frozenset({errno.ENOENT, errno.ENOTDIR, errno.ELOOP})


def _stat(path: str, *, follow_symlinks: bool = True) -> os.stat_result | None:
    """Stat a path, returning None when it does not exist.

    Raises:
        OSError: For failures other than a missing path (e.g. EACCES).
    """
    try:
        return os.stat(path, follow_symlinks=follow_symlinks)
    except OSError as e:
        if e.errno in _MISSING_ERRNOS:
            return None
        raise


class PathClassifier:
    """Answers existence and type questions about paths.

    A missing path is a valid answer (False / PathKind.MISSING), never a
    failure. Genuine system errors, such as permission denied on a parent
    directory, surface as FilesystemError.
    """

    def exists(self, path: StrPath) -> bool:
        """Check whether a path exists, following symlinks."""
        target = os.fspath(path)
        return safely(lambda: _stat(target) is not None)

    def missing(self, path: StrPath) -> bool:
        """Check whether nothing exists at a path, following symlinks."""
        return not self.exists(path)

    def is_file(self, path: StrPath) -> bool:
        """Check whether a path is a regular file, following symlinks."""
        target = os.fspath(path)

        def _is_file() -> bool:
            st = _stat(target)
            return st is not None and stat.S_ISREG(st.st_mode)

        return safely(_is_file)

    def is_directory(self, path: StrPath) -> bool:
        """Check whether a path is a directory, following symlinks."""
        target = os.fspath(path)

        def _is_directory() -> bool:
            st = _stat(target)
            return st is not None and stat.S_ISDIR(st.st_mode)

        return safely(_is_directory)

    def is_link(self, path: StrPath) -> bool:
        """Check whether a path is a symbolic link (dangling or not)."""
        target = os.fspath(path)

        def _is_link() -> bool:
            st = _stat(target, follow_symlinks=False)
            return st is not None and stat.S_ISLNK(st.st_mode)

        return safely(_is_link)

    def is_readable(self, path: StrPath) -> bool:
        target = os.fspath(path)
        return safely(lambda: os.access(target, os.R_OK))

    def is_writable(self, path: StrPath) -> bool:
        target = os.fspath(path)
        return safely(lambda: os.access(target, os.W_OK))

    def is_executable(self, path: StrPath) -> bool:
        target = os.fspath(path)
        return safely(lambda: os.access(target, os.X_OK))

    def classify(self, path: StrPath) -> PathKind:
        """Determine the kind of entry a path denotes right now.

        Links are reported as LINK even when their target is a directory
        or does not exist. Any other existing non-directory entry is
        reported as FILE.

        Args:
            path: Path to classify.

        Returns:
            PathKind for the path.
        """
        if self.is_link(path):
            return PathKind.LINK
        if self.is_directory(path):
            return PathKind.DIRECTORY
        if self.exists(path):
            return PathKind.FILE
        return PathKind.MISSING

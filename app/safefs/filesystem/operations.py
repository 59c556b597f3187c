"""Filesystem operations with typed failures.

Filesystem is the single entry point of the library. Each method checks
its preconditions through the PathClassifier, runs the underlying
primitive calls through safely(), and reports every failure as exactly
one typed FilesystemError.

Note:
    delete() changes the process-wide working directory for its
    duration. At most one delete may be in flight per process; callers
    that delete from several threads must serialize the calls.
"""

import glob as globbing
import logging
import os
import shutil
import stat
import tempfile
from collections.abc import Iterator
from pathlib import Path

from safefs.core.errors import (
    DestinationAlreadyExistsError,
    DirectoryAlreadyExistsError,
    DirectoryDoesNotExistError,
    FailedToAppendFileError,
    FailedToChangeDirectoryError,
    FailedToChangePermissionsError,
    FailedToCleanDirectoryError,
    FailedToCopyFileError,
    FailedToCreateDirectoryError,
    FailedToCreateFileError,
    FailedToCreateLinkError,
    FailedToCreateTemporaryDirectoryError,
    FailedToCreateTemporaryFileError,
    FailedToDeleteDirectoryError,
    FailedToDeleteFileError,
    FailedToDeleteLinkError,
    FailedToDetermineCurrentWorkingDirectoryError,
    FailedToDetermineFileSizeError,
    FailedToDetermineRealPathError,
    FailedToGetContentsError,
    FailedToGlobError,
    FailedToPrependFileError,
    FailedToPutContentsError,
    FailedToReadLinkError,
    FailedToRenamePathError,
    FileAlreadyExistsError,
    FileDoesNotExistError,
    FileIsNotReadableError,
    FileIsNotWritableError,
    LinkDoesNotExistError,
    ShouldNotHappenError,
    SourceDoesNotExistError,
)
from safefs.core.safety import safely
from safefs.core.settings import FilesystemSettings, load_settings_or_default
from safefs.filesystem.classifier import PathClassifier
from safefs.filesystem.models import FilesystemPath, PathKind, StrPath, TraversalEntry
from safefs.filesystem.relative import relative_path
from safefs.filesystem.traversal import list_entries, search, walk

logger = logging.getLogger(__name__)


def _validated(path: StrPath) -> str:
    """Return the path as a string, rejecting blank paths.

    Raises:
        InvalidPathError: If the path is empty or whitespace only.
    """
    return FilesystemPath.new(path).value


def _iterate_safely(entries: Iterator[TraversalEntry]) -> Iterator[TraversalEntry]:
    """Re-yield entries, running every iteration step through safely()."""
    while True:
        entry = safely(lambda: next(entries, None))
        if entry is None:
            return
        yield entry


class Filesystem:
    """Safe access to files, directories and symbolic links.

    All methods accept a str or any os.PathLike (including FilesystemPath).
    Text contents are encoded and decoded with the configured encoding.

    Attributes:
        _settings: Settings controlling encoding, modes and temp locations.
        _classifier: Classifier answering every existence/type question.
    """

    def __init__(self, settings: FilesystemSettings | None = None) -> None:
        """Initialize the Filesystem.

        Args:
            settings: Settings to use. Defaults to FilesystemSettings().
        """
        self._settings = settings or FilesystemSettings()
        self._classifier = PathClassifier()

    @classmethod
    def new(cls) -> "Filesystem":
        """Create a ready-to-use Filesystem with default settings."""
        return cls()

    @classmethod
    def from_config(cls, path: Path | None = None) -> "Filesystem":
        """Create a Filesystem from a settings file.

        Args:
            path: Settings file. If None, uses the default settings path.
                A missing file yields default settings.

        Returns:
            Filesystem configured from the file.

        Raises:
            SettingsError: If the file exists but is invalid.
        """
        return cls(load_settings_or_default(path))

    @property
    def settings(self) -> FilesystemSettings:
        return self._settings

    # =========================================================================
    # Classification
    # =========================================================================

    def path(self, value: StrPath) -> FilesystemPath:
        """Wrap a location in a FilesystemPath (no I/O)."""
        return FilesystemPath.new(value)

    def exists(self, path: StrPath) -> bool:
        return self._classifier.exists(path)

    def missing(self, path: StrPath) -> bool:
        return self._classifier.missing(path)

    def is_file(self, path: StrPath) -> bool:
        return self._classifier.is_file(path)

    def is_directory(self, path: StrPath) -> bool:
        return self._classifier.is_directory(path)

    def is_link(self, path: StrPath) -> bool:
        return self._classifier.is_link(path)

    def is_readable(self, path: StrPath) -> bool:
        return self._classifier.is_readable(path)

    def is_writable(self, path: StrPath) -> bool:
        return self._classifier.is_writable(path)

    def is_executable(self, path: StrPath) -> bool:
        return self._classifier.is_executable(path)

    def classify(self, path: StrPath) -> PathKind:
        return self._classifier.classify(path)

    # =========================================================================
    # Path strings
    # =========================================================================

    def basename(self, path: StrPath, suffix: str = "") -> str:
        """Return the final component of a path, ignoring trailing slashes.

        Args:
            path: Path to inspect.
            suffix: Suffix removed from the name when present (unless the
                name consists only of the suffix).

        Returns:
            The trailing name component.
        """
        target = os.fspath(path)

        def _basename() -> str:
            name = os.path.basename(target.rstrip("/"))
            if suffix and name != suffix and name.endswith(suffix):
                return name[: -len(suffix)]
            return name

        return safely(_basename)

    def extension(self, path: StrPath) -> str:
        """Return the text after the last dot of the name, or ""."""
        name = self.basename(path)
        return name.rsplit(".", 1)[1] if "." in name else ""

    def filename(self, path: StrPath) -> str:
        """Return the name without its extension."""
        name = self.basename(path)
        return name.rsplit(".", 1)[0] if "." in name else name

    def parent_directory(self, path: StrPath, levels: int = 1) -> str:
        """Return the parent directory of a path.

        A bare name has "." as its parent; the root is its own parent.

        Args:
            path: Path to inspect.
            levels: Number of levels to go up (at least 1).

        Returns:
            The parent directory path.
        """
        target = os.fspath(path)

        def _parent_directory() -> str:
            if levels < 1:
                msg = f"levels must be at least 1, got {levels}"
                raise ValueError(msg)
            parent = target
            for _ in range(levels):
                parent = os.path.dirname(parent.rstrip("/") or "/") or "."
            return parent

        return safely(_parent_directory)

    def pathname(self, path: StrPath) -> str:
        return os.fspath(path)

    def relative(self, origin: StrPath, target: StrPath) -> str:
        """Compute the relative path leading from origin to target.

        Inputs that are existing directories are treated as directories
        (trailing "/"); see relative_path() for the algorithm.

        Raises:
            InvalidPathError: If the paths share no common root.
        """
        source = os.fspath(origin)
        destination = os.fspath(target)
        return safely(
            lambda: relative_path(source, destination, is_directory=self.is_directory)
        )

    # =========================================================================
    # Metadata
    # =========================================================================

    def realpath(self, path: StrPath) -> str:
        target = os.fspath(path)
        return safely(
            lambda: os.path.realpath(target, strict=True),
            FailedToDetermineRealPathError,
        )

    def permissions(self, path: StrPath) -> str:
        """Return the permission bits of a path as an octal string (e.g. "644")."""
        target = os.fspath(path)
        return safely(lambda: f"{stat.S_IMODE(os.stat(target).st_mode) & 0o777:o}")

    def size(self, path: StrPath) -> int:
        target = os.fspath(path)
        return safely(lambda: os.path.getsize(target), FailedToDetermineFileSizeError)

    def last_access_time(self, path: StrPath) -> int:
        target = os.fspath(path)
        return safely(lambda: int(os.stat(target).st_atime))

    def last_change_time(self, path: StrPath) -> int:
        target = os.fspath(path)
        return safely(lambda: int(os.stat(target).st_ctime))

    def last_modified_time(self, path: StrPath) -> int:
        target = os.fspath(path)
        return safely(lambda: int(os.stat(target).st_mtime))

    def link_target(self, path: StrPath) -> str:
        target = os.fspath(path)
        return safely(lambda: os.readlink(target), FailedToReadLinkError)

    # =========================================================================
    # Working and temporary directories
    # =========================================================================

    def current_working_directory(self) -> str:
        return safely(os.getcwd, FailedToDetermineCurrentWorkingDirectoryError)

    def chdir(self, directory: StrPath) -> None:
        target = os.fspath(directory)
        safely(lambda: os.chdir(target), FailedToChangeDirectoryError)

    def temporary_directory(self) -> str:
        """Return the configured temporary directory, or the system default."""
        return self._settings.temporary_directory or safely(tempfile.gettempdir)

    def create_temporary_directory(self, prefix: str | None = None) -> str:
        """Create a new, uniquely named directory in the temporary directory.

        Args:
            prefix: Name prefix. Defaults to the configured temporary_prefix.

        Returns:
            Path of the created directory.
        """
        name_prefix = self._settings.temporary_prefix if prefix is None else prefix
        directory = self.temporary_directory()
        return safely(
            lambda: tempfile.mkdtemp(prefix=name_prefix, dir=directory),
            FailedToCreateTemporaryDirectoryError,
        )

    def create_temporary_file(self, prefix: str | None = None) -> str:
        """Create a new, empty, uniquely named file in the temporary directory.

        Args:
            prefix: Name prefix. Defaults to the configured temporary_prefix.

        Returns:
            Path of the created file.
        """
        name_prefix = self._settings.temporary_prefix if prefix is None else prefix
        directory = self.temporary_directory()

        def _create_temporary_file() -> str:
            fd, name = tempfile.mkstemp(prefix=name_prefix, dir=directory)
            os.close(fd)
            return name

        return safely(_create_temporary_file, FailedToCreateTemporaryFileError)

    # =========================================================================
    # Reading and writing
    # =========================================================================

    def read_bytes(self, path: StrPath) -> bytes:
        """Read the whole contents of a file as bytes.

        Raises:
            FileDoesNotExistError: If nothing exists at the path.
            FileIsNotReadableError: If the path cannot be read.
            FailedToGetContentsError: If reading fails (e.g. a directory).
        """
        target = os.fspath(path)

        def _read_bytes() -> bytes:
            if self.missing(target):
                raise FileDoesNotExistError(target)
            if not self.is_readable(target):
                raise FileIsNotReadableError(target)
            with open(target, "rb") as f:
                return f.read()

        return safely(_read_bytes, FailedToGetContentsError)

    def read(self, path: StrPath) -> str:
        """Read the whole contents of a file as text.

        Raises:
            FileDoesNotExistError: If nothing exists at the path.
            FileIsNotReadableError: If the path cannot be read.
            FailedToGetContentsError: If reading or decoding fails.
        """
        contents = self.read_bytes(path)
        return safely(lambda: contents.decode(self._settings.encoding), FailedToGetContentsError)

    def write(self, path: StrPath, contents: str | bytes) -> int:
        """Overwrite a file with new contents.

        A missing file is created through create_file(), including its
        parent directory.

        Args:
            path: File to write.
            contents: Text (encoded with the configured encoding) or bytes.

        Returns:
            Number of bytes written.

        Raises:
            InvalidPathError: If the path is blank.
            FileIsNotWritableError: If the existing file cannot be written.
            FailedToPutContentsError: If writing fails.
        """
        target = _validated(path)

        def _write() -> int:
            if self.missing(target):
                return self.create_file(target, contents)
            if not self.is_writable(target):
                raise FileIsNotWritableError(target)
            with open(target, "wb") as f:
                return f.write(self._encode(contents))

        return safely(_write, FailedToPutContentsError)

    def append(self, path: StrPath, contents: str) -> int:
        """Add text to the end of a file.

        This is a read-modify-write sequence and is not atomic.

        Returns:
            Total number of bytes in the file after the write.
        """
        target = _validated(path)
        return safely(
            lambda: self.write(target, self.read(target) + contents),
            FailedToAppendFileError,
        )

    def prepend(self, path: StrPath, contents: str) -> int:
        """Add text to the beginning of a file.

        This is a read-modify-write sequence and is not atomic.

        Returns:
            Total number of bytes in the file after the write.
        """
        target = _validated(path)
        return safely(
            lambda: self.write(target, contents + self.read(target)),
            FailedToPrependFileError,
        )

    def _encode(self, contents: str | bytes) -> bytes:
        if isinstance(contents, bytes):
            return contents
        return contents.encode(self._settings.encoding)

    # =========================================================================
    # Creating
    # =========================================================================

    def create_directory(
        self,
        path: StrPath,
        mode: int | None = None,
        recursive: bool = True,
    ) -> None:
        """Create a directory, including missing parents by default.

        A directory that appears between the existence check and the
        create call (created by someone else) is accepted.

        Args:
            path: Directory to create.
            mode: Permission bits. Defaults to the configured directory_mode.
            recursive: If True, create missing parent directories too.

        Raises:
            DirectoryAlreadyExistsError: If the directory already exists.
            FailedToCreateDirectoryError: If the directory cannot be created.
        """
        target = _validated(path)
        dir_mode = self._settings.directory_mode if mode is None else mode

        def _create_directory() -> None:
            if self.is_directory(target):
                raise DirectoryAlreadyExistsError(f"Directory already exists: {target}")
            try:
                if recursive:
                    os.makedirs(target, dir_mode)
                else:
                    os.mkdir(target, dir_mode)
            except FileExistsError:
                if not self.is_directory(target):
                    raise
                logger.debug("Directory %s appeared while creating it", target)

        safely(_create_directory, FailedToCreateDirectoryError)

    def touch(self, path: StrPath) -> None:
        """Create an empty file, creating its parent directory if needed.

        Raises:
            InvalidPathError: If the path is blank.
            FileAlreadyExistsError: If a file already exists at the path.
            FailedToCreateFileError: If something else exists at the path,
                or the file cannot be created.
        """
        target = _validated(path)

        def _touch() -> None:
            if self.exists(target):
                if self.is_file(target):
                    raise FileAlreadyExistsError(target)
                raise FailedToCreateFileError(f"Path already exists and is not a file: {target}")

            parent = self.parent_directory(target)
            if not self.is_directory(parent):
                self.create_directory(parent)

            # A dangling link is followed and its target created.
            Path(target).touch(exist_ok=self.is_link(target))

        safely(_touch, FailedToCreateFileError)

    def create_file(self, path: StrPath, contents: str | bytes = "") -> int:
        """Create a file and write its initial contents.

        Blank contents (empty or whitespace only) are not written.

        Returns:
            Number of bytes written, 0 for blank contents.

        Raises:
            FileAlreadyExistsError: If a file already exists at the path.
            FailedToCreateFileError: If the file cannot be created.
        """
        target = _validated(path)

        def _create_file() -> int:
            self.touch(target)
            if not contents.strip():
                return 0
            return self.write(target, contents)

        return safely(_create_file, FailedToCreateFileError)

    def symlink(self, target: StrPath, link: StrPath) -> None:
        """Create a symbolic link at ``link`` pointing to ``target``."""
        source = os.fspath(target)
        name = os.fspath(link)
        safely(lambda: os.symlink(source, name), FailedToCreateLinkError)

    # =========================================================================
    # Copying, moving and permissions
    # =========================================================================

    def copy(self, source: StrPath, destination: StrPath) -> None:
        """Copy a file byte for byte.

        Raises:
            SourceDoesNotExistError: If the source does not exist.
            DestinationAlreadyExistsError: If the destination exists.
            FailedToCopyFileError: If the copy fails.
        """
        src = _validated(source)
        dst = _validated(destination)

        def _copy() -> None:
            if self.missing(src):
                raise SourceDoesNotExistError(src)
            if self.exists(dst):
                raise DestinationAlreadyExistsError(dst)
            shutil.copyfile(src, dst)

        safely(_copy, FailedToCopyFileError)

    def move(self, source: StrPath, destination: StrPath) -> None:
        """Rename a path.

        Raises:
            ShouldNotHappenError: If the source is missing or the
                destination already exists.
            FailedToRenamePathError: If the rename fails.
        """
        src = _validated(source)
        dst = _validated(destination)

        def _move() -> None:
            if self.missing(src):
                raise ShouldNotHappenError(f"Source file does not exist: {src}")
            if self.exists(dst):
                raise ShouldNotHappenError(f"Destination file already exists: {dst}")
            os.rename(src, dst)

        safely(_move, FailedToRenamePathError)

    def chmod(self, path: StrPath, mode: int) -> None:
        target = _validated(path)
        safely(lambda: os.chmod(target, mode), FailedToChangePermissionsError)

    # =========================================================================
    # Listing and traversal
    # =========================================================================

    def glob(self, pattern: str, recursive: bool = False) -> list[str]:
        """Expand a shell-style pattern into a sorted list of paths."""
        return safely(
            lambda: sorted(globbing.glob(pattern, recursive=recursive)),
            FailedToGlobError,
        )

    def list_directory(self, directory: StrPath) -> list[TraversalEntry]:
        """List the immediate children of a directory, sorted by name.

        Raises:
            InvalidDirectoryPathError: If the path is not a directory.
        """
        return safely(lambda: list_entries(directory, classifier=self._classifier))

    def walk(self, directory: StrPath, leaves_only: bool = False) -> Iterator[TraversalEntry]:
        """Walk a directory tree child-first.

        Failures while iterating (e.g. an unreadable subdirectory) are
        raised as FilesystemError from the iteration step.

        Raises:
            InvalidDirectoryPathError: If the path is not a directory.
        """
        entries = safely(
            lambda: walk(directory, leaves_only=leaves_only, classifier=self._classifier)
        )
        return _iterate_safely(entries)

    def find(
        self,
        directory: StrPath,
        pattern: str,
        leaves_only: bool = False,
    ) -> list[TraversalEntry]:
        """Collect every entry below a directory whose path matches a regex.

        Raises:
            InvalidDirectoryPathError: If the path is not a directory.
            FilesystemError: If the pattern is invalid or the walk fails.
        """
        return safely(
            lambda: list(
                search(directory, pattern, leaves_only=leaves_only, classifier=self._classifier)
            )
        )

    # =========================================================================
    # Deleting
    # =========================================================================

    def delete(self, path: StrPath) -> None:
        """Delete whatever a path denotes.

        Links are removed without touching their target, directories are
        removed recursively, anything else is deleted as a file. The
        working directory is switched to the path's parent for the
        duration of the call and restored afterwards.

        Raises:
            InvalidPathError: If the path is blank.
            FailedToChangeDirectoryError: If the parent directory cannot
                be entered.
            FileDoesNotExistError: If nothing exists at the path.
            FilesystemError: Any error of the dispatched delete.
        """
        target = os.path.abspath(_validated(path))
        previous = self.current_working_directory()

        self.chdir(self.parent_directory(target))
        try:
            kind = self.classify(target)
            logger.debug("Deleting %s (%s)", target, kind.value)
            if kind is PathKind.LINK:
                self.delete_link(target)
            elif kind is PathKind.DIRECTORY:
                self.delete_directory(target)
            else:
                self.delete_file(target)
        finally:
            if self.is_directory(previous):
                self.chdir(previous)
            else:
                logger.warning("Working directory %s no longer exists, not restoring it", previous)

    def clean_directory(self, directory: StrPath) -> None:
        """Delete everything inside a directory, keeping the directory.

        The walk is not transactional: a failure leaves the directory
        partially cleaned.

        Raises:
            InvalidDirectoryPathError: If the path is not a directory.
            FailedToCleanDirectoryError: If an entry cannot be removed.
        """
        target = _validated(directory)

        def _clean_directory() -> None:
            for entry in walk(target, classifier=self._classifier):
                self.delete(entry.path)

        safely(_clean_directory, FailedToCleanDirectoryError)

    def delete_directory(self, path: StrPath) -> None:
        """Delete a directory and everything below it.

        Raises:
            DirectoryDoesNotExistError: If the path is not a directory, or
                is a symbolic link to one.
            FailedToDeleteDirectoryError: If the directory cannot be removed.
        """
        target = _validated(path)

        def _delete_directory() -> None:
            if self.is_link(target) or not self.is_directory(target):
                raise DirectoryDoesNotExistError(target)
            self.clean_directory(target)
            os.rmdir(target)

        safely(_delete_directory, FailedToDeleteDirectoryError)

    def delete_file(self, path: StrPath) -> None:
        """Delete a file.

        Raises:
            FileDoesNotExistError: If the path is not a file.
            FailedToDeleteFileError: If the file cannot be removed.
        """
        target = _validated(path)

        def _delete_file() -> None:
            if not self.is_file(target):
                raise FileDoesNotExistError(target)
            os.unlink(target)

        safely(_delete_file, FailedToDeleteFileError)

    def delete_link(self, path: StrPath) -> None:
        """Delete a symbolic link, leaving its target untouched.

        Raises:
            LinkDoesNotExistError: If the path is not a symbolic link.
            FailedToDeleteLinkError: If the link cannot be removed.
        """
        target = _validated(path)

        def _delete_link() -> None:
            if not self.is_link(target):
                raise LinkDoesNotExistError(target)
            os.unlink(target)

        safely(_delete_link, FailedToDeleteLinkError)

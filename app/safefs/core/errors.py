"""Exception taxonomy for filesystem operations.

Every failure raised by a filesystem operation derives from
FilesystemError, so callers can catch the whole family or a single
failure condition. TrappedWarningError is the one exception outside the
family: it is the generic runtime error produced by the warning trap and
is always re-classified before it reaches a caller.
"""


class FilesystemError(Exception):
    """Base exception for all filesystem operation failures."""


class TrappedWarningError(RuntimeError):
    """Raised when a runtime warning is emitted inside an error trap.

    Attributes:
        message: Text of the original warning.
        category: Warning class of the original signal (its severity).
        filename: File that emitted the warning.
        lineno: Line number that emitted the warning.
    """

    def __init__(
        self,
        message: str,
        *,
        category: type[Warning] = UserWarning,
        filename: str = "",
        lineno: int = 0,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category
        self.filename = filename
        self.lineno = lineno


# =============================================================================
# Existence conflicts
# =============================================================================


class SourceDoesNotExistError(FilesystemError):
    """Raised when the source of a copy does not exist."""


class DestinationAlreadyExistsError(FilesystemError):
    """Raised when the destination of a copy already exists."""


class FileAlreadyExistsError(FilesystemError):
    """Raised when a file is created over an existing file."""


class DirectoryAlreadyExistsError(FilesystemError):
    """Raised when a directory is created over an existing directory."""


class FileDoesNotExistError(FilesystemError):
    """Raised when a file is required but not found."""


class DirectoryDoesNotExistError(FilesystemError):
    """Raised when a directory is required but not found."""


class LinkDoesNotExistError(FilesystemError):
    """Raised when a symbolic link is required but not found."""


# =============================================================================
# Permission and access
# =============================================================================


class FileIsNotReadableError(FilesystemError):
    """Raised when a file exists but cannot be read."""


class FileIsNotWritableError(FilesystemError):
    """Raised when a file exists but cannot be written."""


class FailedToChangePermissionsError(FilesystemError):
    """Raised when chmod fails."""


# =============================================================================
# Operation failures
# =============================================================================


class FailedToAppendFileError(FilesystemError):
    """Raised when appending to a file fails."""


class FailedToChangeDirectoryError(FilesystemError):
    """Raised when the working directory cannot be changed."""


class FailedToCleanDirectoryError(FilesystemError):
    """Raised when a directory cannot be emptied."""


class FailedToCopyFileError(FilesystemError):
    """Raised when a file copy fails."""


class FailedToCreateDirectoryError(FilesystemError):
    """Raised when a directory cannot be created."""


class FailedToCreateFileError(FilesystemError):
    """Raised when a file cannot be created."""


class FailedToCreateLinkError(FilesystemError):
    """Raised when a symbolic link cannot be created."""


class FailedToCreateTemporaryDirectoryError(FilesystemError):
    """Raised when a temporary directory cannot be created."""


class FailedToCreateTemporaryFileError(FilesystemError):
    """Raised when a temporary file cannot be created."""


class FailedToDeleteDirectoryError(FilesystemError):
    """Raised when a directory cannot be removed."""


class FailedToDeleteFileError(FilesystemError):
    """Raised when a file cannot be removed."""


class FailedToDeleteLinkError(FilesystemError):
    """Raised when a symbolic link cannot be removed."""


class FailedToDetermineCurrentWorkingDirectoryError(FilesystemError):
    """Raised when the working directory cannot be determined."""


class FailedToDetermineFileSizeError(FilesystemError):
    """Raised when the size of a path cannot be determined."""


class FailedToDetermineRealPathError(FilesystemError):
    """Raised when a path cannot be resolved to a real path."""


class FailedToGetContentsError(FilesystemError):
    """Raised when reading file contents fails."""


class FailedToGlobError(FilesystemError):
    """Raised when a glob pattern cannot be expanded."""


class FailedToPrependFileError(FilesystemError):
    """Raised when prepending to a file fails."""


class FailedToPutContentsError(FilesystemError):
    """Raised when writing file contents fails."""


class FailedToReadLinkError(FilesystemError):
    """Raised when the target of a symbolic link cannot be read."""


class FailedToRenamePathError(FilesystemError):
    """Raised when a path cannot be renamed."""


# =============================================================================
# Input validation
# =============================================================================


class InvalidPathError(FilesystemError, ValueError):
    """Raised when a path string is empty or blank."""


class InvalidDirectoryPathError(InvalidPathError):
    """Raised when a path is expected to be a directory but is not."""


class InvalidFilePathError(InvalidPathError):
    """Raised when a path is expected to be a file but is not."""


class InvalidLinkPathError(InvalidPathError):
    """Raised when a path is expected to be a symbolic link but is not."""


# =============================================================================
# Internal invariants
# =============================================================================


class ShouldNotHappenError(FilesystemError):
    """Raised on contract violations that indicate a programming error."""

"""Uniform try/translate wrapper for filesystem operations.

Every public filesystem operation runs its primitive calls through
safely(), which guarantees that a failure reaches the caller as exactly
one typed FilesystemError chained to the underlying cause.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from safefs.core.errors import FilesystemError, ShouldNotHappenError
from safefs.core.trap import with_trap

logger = logging.getLogger(__name__)

T = TypeVar("T")


def safely(
    action: Callable[[], T],
    error_kind: type[FilesystemError] = FilesystemError,
) -> T:
    """Run an action and translate any failure into a typed error.

    Errors that already belong to the FilesystemError family were raised
    by a nested operation that classified them, and propagate unchanged
    instead of being re-wrapped as ``error_kind``. Everything else,
    including warnings converted by the error trap and plain OSErrors,
    is re-raised as ``error_kind`` with the original message and the
    original exception as ``__cause__``.

    Args:
        action: Zero-argument callable performing the operation.
        error_kind: FilesystemError subclass to raise on failure.

    Returns:
        The action's return value, unchanged.

    Raises:
        ShouldNotHappenError: If error_kind is not a FilesystemError subclass.
        FilesystemError: An instance of error_kind, or a typed error raised
            by a nested operation.
    """
    if not (isinstance(error_kind, type) and issubclass(error_kind, FilesystemError)):
        name = getattr(error_kind, "__name__", repr(error_kind))
        msg = f'Class "{name}" MUST derive from "{FilesystemError.__name__}".'
        raise ShouldNotHappenError(msg)

    try:
        return with_trap(action)
    except FilesystemError:
        raise
    except Exception as e:
        logger.debug("Translating %s into %s: %s", type(e).__name__, error_kind.__name__, e)
        raise error_kind(str(e)) from e

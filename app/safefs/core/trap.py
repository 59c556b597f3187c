"""Scoped conversion of runtime warnings into exceptions.

While an error trap is active, any warning emitted by the code running
inside it (from Python or from C extensions) aborts that code with a
TrappedWarningError instead of being printed and ignored. The trap is
built on warnings.catch_warnings(), so the previous handler and filters
are restored on every exit path and nested traps restore the handler of
the immediately enclosing trap.

Note:
    The warnings state is process-wide. Like warnings.catch_warnings(),
    an error trap is not thread-safe.
"""

import warnings
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import NoReturn, TextIO, TypeVar

from safefs.core.errors import TrappedWarningError

T = TypeVar("T")


def _raise_trapped_warning(
    message: Warning | str,
    category: type[Warning],
    filename: str,
    lineno: int,
    file: TextIO | None = None,
    line: str | None = None,
) -> NoReturn:
    """Replacement for warnings.showwarning that raises instead of printing."""
    raise TrappedWarningError(
        str(message),
        category=category,
        filename=filename,
        lineno=lineno,
    )


@contextmanager
def error_trap() -> Iterator[None]:
    """Turn every warning emitted inside the block into an exception.

    Raises:
        TrappedWarningError: From inside the block, on the first warning.
    """
    with warnings.catch_warnings():
        # "always" so a repeated warning from one location is never deduplicated
        warnings.simplefilter("always")
        warnings.showwarning = _raise_trapped_warning
        yield


def with_trap(action: Callable[[], T]) -> T:
    """Run an action inside an error trap and return its value.

    Args:
        action: Zero-argument callable to run.

    Returns:
        Whatever the action returns.

    Raises:
        TrappedWarningError: If the action emits a warning.
    """
    with error_trap():
        return action()

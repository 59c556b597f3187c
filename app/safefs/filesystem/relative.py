"""Relative path computation between two paths.

The algorithm compares the two paths segment by segment. Directories
are recognised through a caller-supplied predicate and get a trailing
separator, so the result of relating two directories also ends in "/".

Example:
    >>> relative_path("/tmp/x/to/", "/tmp/x/from/", is_directory=lambda p: True)
    '../from/'
"""

import os
from collections.abc import Callable

from safefs.core.errors import InvalidPathError


def _normalize(path: str, is_directory: Callable[[str], bool]) -> list[str]:
    """Split a path into "/"-separated segments, marking directories."""
    if is_directory(path):
        path = path.rstrip("\\/") + "/"
    return path.replace("\\", "/").split("/")


def _is_rooted(segment: str) -> bool:
    """Check whether a leading segment anchors its path (POSIX root or drive)."""
    return segment == "" or segment.endswith(":")


def relative_path(
    origin: str,
    target: str,
    *,
    is_directory: Callable[[str], bool] = os.path.isdir,
) -> str:
    """Compute the path that leads from ``origin`` to ``target``.

    Leading segments shared by both paths are dropped. At the first
    differing segment, one ".." is added for every remaining segment of
    ``origin`` except the last; when only the last segment of ``origin``
    differs, the result is prefixed with "./".

    Args:
        origin: Path to start from.
        target: Path to reach.
        is_directory: Predicate deciding which inputs denote directories.

    Returns:
        Relative path from origin to target.

    Raises:
        InvalidPathError: If the paths share no common root, e.g. one is
            absolute and the other relative, or they sit on different drives.
    """
    origin_segments = _normalize(origin, is_directory)
    target_segments = _normalize(target, is_directory)

    if origin_segments[0] != target_segments[0] and (
        _is_rooted(origin_segments[0]) or _is_rooted(target_segments[0])
    ):
        msg = f"Paths share no common root: {origin} and {target}"
        raise InvalidPathError(msg)

    result = list(target_segments)

    for depth, segment in enumerate(origin_segments):
        if depth < len(target_segments) and segment == target_segments[depth]:
            result.pop(0)
            continue

        remaining = len(origin_segments) - depth
        if remaining > 1:
            result = [".."] * (remaining - 1) + result
            break

        if result:
            result[0] = "./" + result[0]
        else:
            result = ["."]

    return "/".join(result)

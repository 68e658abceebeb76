"""Workspace root search.

This module only searches; recording the result in the configuration
store is done by Workspace.find_root().
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from wkspc.core.exceptions import WorkingDirectoryError


if TYPE_CHECKING:
    from wkspc.core.ports import FilesystemPort

logger = logging.getLogger(__name__)


def resolve_start(start: Path | str | None = None) -> Path:
    """Turn an optional start path into an absolute directory.

    Relative paths are resolved against the current working directory.

    Args:
        start: Directory to start from. None or "" means the current
            working directory.

    Returns:
        Absolute, resolved start directory.

    Raises:
        WorkingDirectoryError: If start is omitted or relative and the
            current directory cannot be read.
    """
    path = Path(start) if start else Path()
    if path.is_absolute():
        return path.resolve()
    try:
        return Path.cwd().joinpath(path).resolve()
    except OSError as e:
        raise WorkingDirectoryError(
            f"Unable to resolve '{path}' (get current working dir failed)",
            cause=e,
        ) from e


def search_root(
    start: Path | str | None = None,
    *,
    marker: str,
    fs: FilesystemPort,
) -> Path | None:
    """Find the nearest enclosing directory holding the marker directory.

    Walks from start towards the filesystem root and stops at the first
    directory that directly contains a directory named marker.

    Args:
        start: Directory to start from (defaults to the current directory).
        marker: Marker directory name (e.g. ".dvln").
        fs: Filesystem adapter used for the walk.

    Returns:
        The workspace root, or None when no marker exists up to the
        filesystem root.

    Raises:
        WorkingDirectoryError: If start is omitted and cwd is unavailable.
        WorkspaceIOError: If the walk hits an unexpected filesystem error.

    Example:
        >>> from wkspc.adapters.filesystem import LocalFilesystem
        >>> search_root("/tmp/no/such/workspace", marker=".dvln", fs=LocalFilesystem())
    """
    start_dir = resolve_start(start)
    root = fs.find_dir_in_or_above(start_dir, marker)
    if root is None:
        logger.debug("No %s directory found at or above %s", marker, start_dir)
    else:
        logger.debug("Found workspace root %s (searched from %s)", root, start_dir)
    return root

"""Local filesystem adapter implementing FilesystemPort."""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from wkspc.core.exceptions import WorkspaceIOError


logger = logging.getLogger(__name__)


class LocalFilesystem:
    """Filesystem adapter for the local disk.

    Implements FilesystemPort using pathlib. Missing paths are reported as
    False/None; any other OSError is wrapped in WorkspaceIOError.
    """

    def directory_exists(self, path: Path) -> bool:
        """Check whether path is an existing directory.

        Args:
            path: Path to check.

        Returns:
            True if path exists and is a directory (symlinks followed).

        Raises:
            WorkspaceIOError: If the path cannot be inspected.
        """
        try:
            mode = path.stat().st_mode
        except (FileNotFoundError, NotADirectoryError):
            return False
        except OSError as e:
            raise WorkspaceIOError(
                f"Unable to check directory: {path}",
                path=path,
                cause=e,
            ) from e
        return stat.S_ISDIR(mode)

    def create_directory_if_not_exists(self, path: Path) -> bool:
        """Create a directory (and parents) unless it already exists.

        Args:
            path: Directory to create.

        Returns:
            True if the directory was created.

        Raises:
            WorkspaceIOError: If creation fails or path exists as a file.
        """
        if self.directory_exists(path):
            return False
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WorkspaceIOError(
                f"Unable to create directory: {path}",
                path=path,
                cause=e,
            ) from e
        return True

    def create_file_if_not_exists(self, path: Path) -> bool:
        """Create an empty file unless something already exists at path.

        Existing files are left untouched (never truncated).

        Args:
            path: File to create. Its parent directory must exist.

        Returns:
            True if the file was created.

        Raises:
            WorkspaceIOError: If creation fails or path is a directory.
        """
        try:
            with path.open("x"):
                pass
        except FileExistsError:
            if path.is_dir():
                raise WorkspaceIOError(
                    f"Expected a file but found a directory: {path}",
                    path=path,
                ) from None
            return False
        except OSError as e:
            raise WorkspaceIOError(
                f"Unable to create file: {path}",
                path=path,
                cause=e,
            ) from e
        return True

    def find_dir_in_or_above(self, start: Path, name: str) -> Path | None:
        """Find the nearest directory at or above start holding name.

        Args:
            start: Directory to start from.
            name: Directory name that must exist directly inside a match.

        Returns:
            The first matching directory walking upward, or None when the
            filesystem root is reached.

        Raises:
            WorkspaceIOError: If a candidate cannot be inspected.
        """
        for candidate in [start, *start.parents]:
            if self.directory_exists(candidate / name):
                return candidate
            logger.debug("No %s in %s", name, candidate)
        return None

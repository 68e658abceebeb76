"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from pathlib import Path

    from wkspc.core.models import Mutability, Visibility, WorkspaceContext


@runtime_checkable
class ConfigStorePort(Protocol):
    """Process-wide named configuration values.

    The workspace package uses the store both for its settings and as the
    cache of the resolved root and derived paths.
    """

    def get_string(self, key: str) -> str:
        """Return the effective value of key as a string."""
        ...

    def set(self, key: str, value: str) -> None:
        """Override key with value (highest precedence layer)."""
        ...

    def set_default(self, key: str, value: str) -> None:
        """Register the default (lowest precedence) value of key."""
        ...

    def set_desc(
        self,
        key: str,
        description: str,
        visibility: Visibility,
        mutability: Mutability,
    ) -> None:
        """Attach a description and visibility/mutability classes to key."""
        ...


@runtime_checkable
class FilesystemPort(Protocol):
    """Directory and file existence checks and idempotent creation.

    Implementations raise WorkspaceIOError for unexpected failures; a
    missing path is never an error.
    """

    def directory_exists(self, path: Path) -> bool:
        """Return True if path exists and is a directory."""
        ...

    def create_directory_if_not_exists(self, path: Path) -> bool:
        """Create directory path (and parents) if missing.

        Returns:
            True if the directory was created, False if it already existed.
        """
        ...

    def create_file_if_not_exists(self, path: Path) -> bool:
        """Create an empty file at path if missing, never truncating.

        Returns:
            True if the file was created, False if it already existed.
        """
        ...

    def find_dir_in_or_above(self, start: Path, name: str) -> Path | None:
        """Find the nearest directory at or above start containing name.

        Args:
            start: Directory to start searching from.
            name: Name of the directory that must exist directly inside.

        Returns:
            The containing directory, or None if the filesystem root was
            reached without a match.
        """
        ...


@runtime_checkable
class WorkspaceReader(Protocol):
    """Read-only access to workspace locations.

    Reads never create anything on disk, though a cache miss records the
    resolved root in the configuration store.
    """

    def root(self, start: Path | str | None = None) -> Path | None:
        """Return the workspace root, using the cached value if present."""
        ...

    def meta_dir(self) -> Path | None:
        """Return the marker directory of the workspace."""
        ...

    def log_dir(self) -> Path | None:
        """Return the workspace log directory."""
        ...

    def tmp_dir(self) -> Path | None:
        """Return the workspace tmp directory."""
        ...

    def vcs_dir(self) -> Path | None:
        """Return the workspace version-control directory."""
        ...

    def vcs_data_dir(self) -> Path | None:
        """Return the workspace version-control data directory."""
        ...

    def db_dir(self) -> Path | None:
        """Return the workspace database directory."""
        ...

    def db_file(self) -> Path | None:
        """Return the workspace database file."""
        ...

    def context(self) -> WorkspaceContext:
        """Return the root and every derived path."""
        ...


@runtime_checkable
class WorkspaceWriter(Protocol):
    """Mutating access to workspace metadata."""

    def set_root(self, root: Path | str | None) -> WorkspaceContext:
        """Set the workspace root and bootstrap its metadata layout."""
        ...

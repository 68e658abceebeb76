"""Core domain services for wkspc."""

import logging
from pathlib import Path

from wkspc.core.bootstrap import bootstrap, record
from wkspc.core.layout import BOOTSTRAP_STEPS, ROOT_UNSET, Key
from wkspc.core.models import BootstrapResult, WorkspaceContext
from wkspc.core.ports import ConfigStorePort, FilesystemPort
from wkspc.core.resolver import resolve_start, search_root


logger = logging.getLogger(__name__)


class Workspace:
    """Resolves, caches and bootstraps the workspace root.

    The configuration store is the only cache: the root and every derived
    path are kept there under their well-known keys, so other tooling
    sharing the store sees the same values.
    """

    def __init__(self, store: ConfigStorePort, fs: FilesystemPort) -> None:
        self._store = store
        self._fs = fs

    @classmethod
    def default(cls) -> "Workspace":
        """Create a Workspace on the process-wide store and the local disk.

        Returns:
            Workspace using default_store() and LocalFilesystem.
        """
        from wkspc.adapters.filesystem import LocalFilesystem
        from wkspc.config import default_store

        return cls(store=default_store(), fs=LocalFilesystem())

    @property
    def marker(self) -> str:
        """Name of the marker directory identifying a workspace root."""
        return self._store.get_string(Key.META_DIR_NAME)

    def _path(self, key: str) -> Path | None:
        value = self._store.get_string(key)
        if not value or value == ROOT_UNSET:
            return None
        return Path(value)

    # -- Reader -----------------------------------------------------------

    def root(self, start: Path | str | None = None) -> Path | None:
        """Return the workspace root, walking the tree only on a cache miss.

        Once a root has been resolved or set (including "no workspace"),
        the cached value is returned and start is ignored. Use find_root()
        to force a new search.

        Args:
            start: Directory to search from on a cache miss (defaults to cwd).

        Returns:
            The workspace root, or None if there is no workspace.

        Raises:
            WorkingDirectoryError: If start is omitted and cwd is unavailable.
            WorkspaceIOError: If the walk hits an unexpected filesystem error.
        """
        cached = self._store.get_string(Key.ROOT_DIR)
        if cached != ROOT_UNSET:
            return Path(cached) if cached else None
        return self.find_root(start)

    def find_root(self, start: Path | str | None = None) -> Path | None:
        """Search for the workspace root, ignoring the cache, and record it.

        The result (None included) replaces the cached root and every
        derived path key is recomputed. Nothing is created on disk.

        Args:
            start: Directory to search from (defaults to cwd).

        Returns:
            The nearest enclosing workspace root, or None.
        """
        marker = self.marker
        found = search_root(start, marker=marker, fs=self._fs)
        record(found, marker=marker, store=self._store)
        return found

    def forget_root(self) -> None:
        """Drop the cached root so the next root() call searches again."""
        record(None, marker=self.marker, store=self._store)
        self._store.set(Key.ROOT_DIR, ROOT_UNSET)

    def context(self) -> WorkspaceContext:
        """Return the root and every derived path as recorded in the store."""
        root = self.root()
        if root is None:
            return WorkspaceContext()
        derived = {step.name: self._path(step.key) for step in BOOTSTRAP_STEPS}
        return WorkspaceContext(root=root, **derived)

    def meta_dir(self) -> Path | None:
        """Return the marker directory of the workspace."""
        self.root()
        return self._path(Key.META_DIR)

    def log_dir(self) -> Path | None:
        """Return the workspace log directory."""
        self.root()
        return self._path(Key.LOG_DIR)

    def tmp_dir(self) -> Path | None:
        """Return the workspace tmp directory."""
        self.root()
        return self._path(Key.TMP_DIR)

    def vcs_dir(self) -> Path | None:
        """Return the workspace version-control directory."""
        self.root()
        return self._path(Key.VCS_DIR)

    def vcs_data_dir(self) -> Path | None:
        """Return the workspace version-control data directory."""
        self.root()
        return self._path(Key.VCS_DATA_DIR)

    def db_dir(self) -> Path | None:
        """Return the workspace database directory."""
        self.root()
        return self._path(Key.DB_DIR)

    def db_file(self) -> Path | None:
        """Return the workspace database file."""
        self.root()
        return self._path(Key.DB_FILE)

    # -- Writer -----------------------------------------------------------

    def bootstrap(self, root: Path | str) -> BootstrapResult:
        """Record root and create its metadata layout, reporting each step.

        Unlike set_root() this does not raise on a failed step; inspect
        BootstrapResult.ok or call raise_for_failure().

        Args:
            root: Workspace root directory (relative paths are resolved).

        Returns:
            BootstrapResult with per-step outcomes.

        Raises:
            WorkingDirectoryError: If root is relative and cwd is unavailable.
        """
        path = resolve_start(root)
        logger.debug("Bootstrapping workspace at %s", path)
        return bootstrap(path, marker=self.marker, store=self._store, fs=self._fs)

    def set_root(self, root: Path | str | None) -> WorkspaceContext:
        """Set the workspace root and bootstrap its metadata layout.

        An empty or None root leaves the workspace: the cached root and all
        derived keys are cleared and nothing on disk is touched.

        Args:
            root: Workspace root directory, or None/"" to clear.

        Returns:
            The resulting WorkspaceContext.

        Raises:
            BootstrapError: If a step fails; earlier steps stay in place and
                calling set_root() again is safe.
            WorkingDirectoryError: If root is relative and cwd is unavailable.
        """
        if root is None or root == "":
            record(None, marker=self.marker, store=self._store)
            logger.debug("Cleared workspace root")
            return WorkspaceContext()

        self.bootstrap(root).raise_for_failure()
        return self.context()

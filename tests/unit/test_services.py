"""Unit tests for the Workspace service (cached resolution and set_root)."""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

import pytest

from wkspc.core.exceptions import BootstrapError, WorkingDirectoryError
from wkspc.core.layout import BOOTSTRAP_STEPS, ROOT_UNSET, Key, derive_paths
from wkspc.core.models import WorkspaceContext
from wkspc.core.services import Workspace


if TYPE_CHECKING:
    from pathlib import Path

    from tests.conftest import RecordingFilesystem
    from wkspc.adapters.config import MemoryConfigStore


MARKER = ".dvln"


@pytest.mark.core
@pytest.mark.tra("Workspace.Root")
@pytest.mark.tier(1)
class TestRoot:
    """Tests for cached root resolution."""

    def test_root_starts_unresolved(self, store: MemoryConfigStore) -> None:
        assert store.get_string(Key.ROOT_DIR) == ROOT_UNSET

    def test_root_walks_on_cache_miss(self, workspace: Workspace, root_dir: Path) -> None:
        (root_dir / MARKER).mkdir()

        assert workspace.root(root_dir) == root_dir

    def test_root_uses_cache_without_walking(
        self,
        workspace: Workspace,
        recording_fs: RecordingFilesystem,
        root_dir: Path,
    ) -> None:
        """Cached root is returned even after the directory is gone."""
        # Arrange
        ws_root = root_dir / "ws"
        (ws_root / MARKER).mkdir(parents=True)
        first = workspace.root(ws_root / MARKER)
        shutil.rmtree(ws_root)
        recording_fs.calls.clear()

        # Act
        second = workspace.root()

        # Assert
        assert first == ws_root
        assert second == ws_root
        assert recording_fs.calls == []

    def test_root_ignores_start_once_cached(
        self, workspace: Workspace, root_dir: Path
    ) -> None:
        (root_dir / "one" / MARKER).mkdir(parents=True)
        (root_dir / "two" / MARKER).mkdir(parents=True)
        workspace.root(root_dir / "one")

        assert workspace.root(root_dir / "two") == root_dir / "one"

    def test_no_workspace_result_is_cached(
        self,
        workspace: Workspace,
        recording_fs: RecordingFilesystem,
        store: MemoryConfigStore,
        root_dir: Path,
    ) -> None:
        """A search that finds nothing caches "" so later calls skip the walk."""
        assert workspace.root(root_dir) is None
        recording_fs.calls.clear()

        assert workspace.root(root_dir) is None
        assert store.get_string(Key.ROOT_DIR) == ""
        assert recording_fs.calls == []

    def test_find_root_ignores_cache(self, workspace: Workspace, root_dir: Path) -> None:
        (root_dir / "one" / MARKER).mkdir(parents=True)
        (root_dir / "two" / MARKER).mkdir(parents=True)
        workspace.root(root_dir / "one")

        assert workspace.find_root(root_dir / "two") == root_dir / "two"
        assert workspace.root() == root_dir / "two"

    def test_find_root_records_derived_paths(
        self, workspace: Workspace, store: MemoryConfigStore, root_dir: Path
    ) -> None:
        """A found root recomputes derived keys but creates nothing."""
        (root_dir / MARKER).mkdir()

        workspace.find_root(root_dir)

        assert store.get_string(Key.LOG_DIR) == str(root_dir / MARKER / "log")
        assert not (root_dir / MARKER / "log").exists()

    def test_find_root_follows_cwd(
        self,
        workspace: Workspace,
        root_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        inside = root_dir / "ws" / "src"
        inside.mkdir(parents=True)
        (root_dir / "ws" / MARKER).mkdir()
        outside = root_dir / "elsewhere"
        outside.mkdir()

        monkeypatch.chdir(inside)
        assert workspace.find_root() == root_dir / "ws"
        monkeypatch.chdir(outside)
        assert workspace.find_root() is None

    def test_forget_root_forces_new_search(
        self, workspace: Workspace, store: MemoryConfigStore, root_dir: Path
    ) -> None:
        (root_dir / "one" / MARKER).mkdir(parents=True)
        (root_dir / "two" / MARKER).mkdir(parents=True)
        workspace.root(root_dir / "one")

        workspace.forget_root()

        assert store.get_string(Key.ROOT_DIR) == ROOT_UNSET
        assert store.get_string(Key.LOG_DIR) == ""
        assert workspace.root(root_dir / "two") == root_dir / "two"


@pytest.mark.core
@pytest.mark.tra("Workspace.SetRoot")
@pytest.mark.tier(1)
class TestSetRoot:
    """Tests for set_root."""

    def test_set_root_bootstraps_and_returns_context(
        self, workspace: Workspace, root_dir: Path
    ) -> None:
        ctx = workspace.set_root(root_dir)

        assert ctx == WorkspaceContext(**derive_paths(root_dir, MARKER))
        assert ctx.db_file is not None
        assert ctx.db_file.is_file()
        assert workspace.root() == root_dir

    def test_set_root_resolves_relative_path(
        self,
        workspace: Workspace,
        root_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(root_dir)

        ctx = workspace.set_root("proj")

        assert ctx.root == root_dir / "proj"
        assert (root_dir / "proj" / MARKER).is_dir()

    def test_relative_root_with_removed_cwd_raises(
        self,
        workspace: Workspace,
        store: MemoryConfigStore,
        root_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """A relative root needs a cwd; losing it is a reported error."""
        gone = root_dir / "gone"
        gone.mkdir()
        monkeypatch.chdir(gone)
        gone.rmdir()

        with pytest.raises(WorkingDirectoryError) as exc_info:
            workspace.set_root("proj")

        assert isinstance(exc_info.value.cause, FileNotFoundError)
        assert store.get_string(Key.ROOT_DIR) == ROOT_UNSET
        assert not (root_dir / "proj").exists()

    def test_set_root_twice_is_idempotent(
        self, workspace: Workspace, root_dir: Path
    ) -> None:
        first = workspace.set_root(root_dir)
        second = workspace.set_root(root_dir)

        assert first == second

    @pytest.mark.parametrize("empty", ["", None])
    def test_empty_root_clears_cache_and_keys(
        self,
        workspace: Workspace,
        store: MemoryConfigStore,
        root_dir: Path,
        empty: str | None,
    ) -> None:
        """Leaving a workspace clears every key and leaves the disk alone."""
        workspace.set_root(root_dir)

        ctx = workspace.set_root(empty)

        assert ctx == WorkspaceContext()
        assert store.get_string(Key.ROOT_DIR) == ""
        for step in BOOTSTRAP_STEPS:
            assert store.get_string(step.key) == ""
        assert workspace.root() is None
        assert (root_dir / MARKER / "db" / "wkspc.db").is_file()

    def test_set_root_failure_raises_bootstrap_error(
        self, workspace: Workspace, store: MemoryConfigStore, root_dir: Path
    ) -> None:
        meta = root_dir / MARKER
        meta.mkdir()
        (meta / "db").write_text("in the way")

        with pytest.raises(BootstrapError) as exc_info:
            workspace.set_root(root_dir)

        assert exc_info.value.step == "db_dir"
        assert store.get_string(Key.VCS_DATA_DIR) == str(meta / "vcs" / "wkspc")
        assert store.get_string(Key.DB_FILE) == ""


@pytest.mark.core
@pytest.mark.tra("Workspace.Reader")
@pytest.mark.tier(1)
class TestReaderPaths:
    """Tests for the derived path readers."""

    def test_readers_return_none_without_workspace(
        self, workspace: Workspace, root_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(root_dir)

        assert workspace.log_dir() is None
        assert workspace.tmp_dir() is None
        assert workspace.db_file() is None
        assert workspace.context() == WorkspaceContext()

    def test_readers_resolve_root_on_first_use(
        self, workspace: Workspace, root_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (root_dir / MARKER).mkdir()
        sub = root_dir / "sub"
        sub.mkdir()
        monkeypatch.chdir(sub)

        assert workspace.log_dir() == root_dir / MARKER / "log"
        assert workspace.tmp_dir() == root_dir / MARKER / "tmp"

    def test_readers_after_set_root(self, workspace: Workspace, root_dir: Path) -> None:
        workspace.set_root(root_dir)
        meta = root_dir / MARKER

        assert workspace.meta_dir() == meta
        assert workspace.vcs_dir() == meta / "vcs"
        assert workspace.vcs_data_dir() == meta / "vcs" / "wkspc"
        assert workspace.db_dir() == meta / "db"
        assert workspace.db_file() == meta / "db" / "wkspc.db"
        assert workspace.context().static_file == meta / "vcs" / "wkspc" / "static.dvln"

    def test_default_uses_process_store(self) -> None:
        from wkspc.config import default_store

        ws = Workspace.default()

        assert ws.marker == default_store().get_string(Key.META_DIR_NAME)

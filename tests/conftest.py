"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from wkspc.adapters.config import MemoryConfigStore
from wkspc.adapters.filesystem import LocalFilesystem
from wkspc.config import default_store, register_workspace_settings
from wkspc.core.services import Workspace


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, ports, and services")
    config.addinivalue_line("markers", "adapters: Filesystem and config store adapters")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


@pytest.fixture(autouse=True)
def _fresh_default_store():
    """Give every test its own process-wide store."""
    default_store.cache_clear()
    yield
    default_store.cache_clear()


@pytest.fixture
def store() -> MemoryConfigStore:
    """Registered store isolated from the real environment."""
    return register_workspace_settings(MemoryConfigStore(environ={}))


@pytest.fixture
def fs() -> LocalFilesystem:
    return LocalFilesystem()


class RecordingFilesystem(LocalFilesystem):
    """LocalFilesystem that records every call made through the port."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Path]] = []

    def directory_exists(self, path: Path) -> bool:
        self.calls.append(("directory_exists", path))
        return super().directory_exists(path)

    def create_directory_if_not_exists(self, path: Path) -> bool:
        self.calls.append(("create_directory_if_not_exists", path))
        return super().create_directory_if_not_exists(path)

    def create_file_if_not_exists(self, path: Path) -> bool:
        self.calls.append(("create_file_if_not_exists", path))
        return super().create_file_if_not_exists(path)

    def find_dir_in_or_above(self, start: Path, name: str) -> Path | None:
        self.calls.append(("find_dir_in_or_above", start))
        return super().find_dir_in_or_above(start, name)


@pytest.fixture
def recording_fs() -> RecordingFilesystem:
    """Reusable filesystem adapter that records calls for assertions."""
    return RecordingFilesystem()


@pytest.fixture
def workspace(store: MemoryConfigStore, recording_fs: RecordingFilesystem) -> Workspace:
    return Workspace(store=store, fs=recording_fs)


@pytest.fixture
def root_dir(tmp_path: Path) -> Path:
    """Resolved temporary directory usable as a workspace root."""
    return tmp_path.resolve()

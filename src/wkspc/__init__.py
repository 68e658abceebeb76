"""wkspc - locate and bootstrap project workspaces.

A workspace is a directory tree whose root holds a marker directory
(".dvln" by default). This library finds the nearest enclosing root,
caches it in a shared configuration store and creates the fixed metadata
layout (log, tmp, vcs and db) under the marker.

Example:
    >>> from wkspc import Workspace
    >>> ws = Workspace.default()
    >>> ctx = ws.set_root("/src/myproject")  # creates /src/myproject/.dvln/...
    >>> ws.log_dir()
    PosixPath('/src/myproject/.dvln/log')
"""

from wkspc.adapters.config import MemoryConfigStore
from wkspc.adapters.filesystem import LocalFilesystem
from wkspc.config import default_store, register_workspace_settings
from wkspc.core.exceptions import (
    BootstrapError,
    ConfigurationError,
    WkspcError,
    WorkingDirectoryError,
    WorkspaceIOError,
)
from wkspc.core.layout import BOOTSTRAP_STEPS, DEFAULT_MARKER, Key
from wkspc.core.models import (
    BootstrapResult,
    Mutability,
    Setting,
    Visibility,
    WorkspaceContext,
)
from wkspc.core.ports import (
    ConfigStorePort,
    FilesystemPort,
    WorkspaceReader,
    WorkspaceWriter,
)
from wkspc.core.resolver import search_root
from wkspc.core.services import Workspace


__version__ = "0.1.0"

__all__ = [
    "BOOTSTRAP_STEPS",
    "DEFAULT_MARKER",
    "BootstrapError",
    "BootstrapResult",
    "ConfigStorePort",
    "ConfigurationError",
    "FilesystemPort",
    "Key",
    "LocalFilesystem",
    "MemoryConfigStore",
    "Mutability",
    "Setting",
    "Visibility",
    "WkspcError",
    "WorkingDirectoryError",
    "Workspace",
    "WorkspaceContext",
    "WorkspaceIOError",
    "WorkspaceReader",
    "WorkspaceWriter",
    "__version__",
    "default_store",
    "register_workspace_settings",
    "search_root",
]

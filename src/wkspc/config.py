"""Configuration utilities for wkspc.

This module registers the workspace settings and provides the
process-wide configuration store shared by the package and its callers.
"""

from __future__ import annotations

from functools import cache

from wkspc.adapters.config import MemoryConfigStore
from wkspc.core.layout import WORKSPACE_SETTINGS
from wkspc.core.models import Mutability, Setting, Visibility


LOG_LEVEL_KEY = "wkspcLogLevel"

CLI_SETTINGS: tuple[Setting, ...] = (
    Setting(
        key=LOG_LEVEL_KEY,
        default="WARNING",
        description="log level for wkspc commands",
        visibility=Visibility.NORMAL_USE,
        mutability=Mutability.BASIC_GLOBAL,
    ),
)


def register_workspace_settings(store: MemoryConfigStore) -> MemoryConfigStore:
    """Register defaults and descriptions of every wkspc setting.

    Args:
        store: Store to register into.

    Returns:
        The same store, for chaining.

    Example:
        >>> from wkspc.adapters.config import MemoryConfigStore
        >>> store = register_workspace_settings(MemoryConfigStore(environ={}))
        >>> store.get_string("wkspcMetaDirName")
        '.dvln'
    """
    for setting in (*WORKSPACE_SETTINGS, *CLI_SETTINGS):
        store.register(setting)
    return store


@cache
def default_store() -> MemoryConfigStore:
    """Return the process-wide configuration store, registering on first use."""
    return register_workspace_settings(MemoryConfigStore())

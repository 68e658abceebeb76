"""Core domain module for wkspc.

This module contains the domain models, port definitions and the
resolution and bootstrap logic. It depends on adapters only through ports.
"""

from wkspc.core.models import BootstrapResult, WorkspaceContext
from wkspc.core.ports import (
    ConfigStorePort,
    FilesystemPort,
    WorkspaceReader,
    WorkspaceWriter,
)
from wkspc.core.services import Workspace


__all__ = [
    "BootstrapResult",
    "ConfigStorePort",
    "FilesystemPort",
    "Workspace",
    "WorkspaceContext",
    "WorkspaceReader",
    "WorkspaceWriter",
]

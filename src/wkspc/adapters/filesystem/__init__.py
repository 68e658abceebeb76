"""Filesystem adapters."""

from wkspc.adapters.filesystem.local import LocalFilesystem


__all__ = ["LocalFilesystem"]

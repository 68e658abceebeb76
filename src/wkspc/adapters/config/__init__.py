"""Configuration store adapters."""

from wkspc.adapters.config.memory_store import MemoryConfigStore


__all__ = ["MemoryConfigStore"]

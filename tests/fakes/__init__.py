"""Shared test doubles — re-export memory backends."""

from __future__ import annotations

from corufa.persistence.memory_backend import MemoryKeyValueStore

__all__ = ["MemoryKeyValueStore"]

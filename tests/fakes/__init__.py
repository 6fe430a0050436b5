"""Shared test doubles — re-export the in-memory file store."""

from __future__ import annotations

from achgen.persistence.memory_backend import MemoryFileStore

__all__ = ["MemoryFileStore"]

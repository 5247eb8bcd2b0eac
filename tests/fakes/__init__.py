"""Shared test doubles: re-exported memory backends."""

from __future__ import annotations

from docklogger.persistence.memory_backend import (
    MemoryCacheBackend,
    MemoryEntryStore,
    MemoryHolidayStore,
    MemorySummaryStore,
)

__all__ = ["MemoryCacheBackend", "MemoryEntryStore", "MemoryHolidayStore", "MemorySummaryStore"]

"""Shared test doubles — re-export memory backends."""

from __future__ import annotations

from flatpay.persistence.memory_backend import MemoryIdAllocator, MemoryRecordStore

__all__ = ["MemoryIdAllocator", "MemoryRecordStore"]

"""Re-export persistence protocols from core for convenience."""

from __future__ import annotations

from flatpay.core.protocols import IIdAllocator, IRecordStore

__all__ = ["IIdAllocator", "IRecordStore"]

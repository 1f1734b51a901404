"""Protocol interfaces for the FlatPay persistence layer.

Entity services depend on these Protocols only: structural typing,
no inheritance required, easy to swap for the in-memory fakes in tests.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from flatpay.core.types import Fields, FieldsIn, FileName, RecordId


# ---------------------------------------------------------------------------
# Persistence: Record Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IRecordStore(Protocol):
    """Line-oriented CRUD over one comma-delimited file per call."""

    def append(self, file_name: FileName, fields: FieldsIn) -> None: ...

    def read_all(self, file_name: FileName) -> list[Fields]: ...

    def replace_or_delete(
        self, file_name: FileName, key: RecordId, fields: Optional[FieldsIn], delete: bool
    ) -> None: ...


# ---------------------------------------------------------------------------
# Persistence: ID Allocator
# ---------------------------------------------------------------------------

@runtime_checkable
class IIdAllocator(Protocol):
    """Hands out the next integer key for a logical file name."""

    def next_id(self, name: FileName) -> RecordId: ...

"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

import os

from flatpay.core.config import AppSettings
from flatpay.persistence.flatfile_backend import FlatFileRecordStore
from flatpay.persistence.id_ledger import FileIdAllocator


def create_persistence(settings: AppSettings | None = None):
    """Create wired-up persistence backends from application settings.

    Returns:
        Tuple of (record_store, id_allocator).
    """
    if settings is None:
        settings = AppSettings()
    storage = settings.storage

    record_store = FlatFileRecordStore(
        data_dir=storage.data_dir,
        encoding=storage.encoding,
        temp_prefix=storage.temp_prefix,
    )

    id_allocator = FileIdAllocator(
        ledger_path=os.path.join(storage.data_dir, storage.id_ledger_file),
        encoding=storage.encoding,
        temp_prefix=storage.temp_prefix,
    )

    return record_store, id_allocator

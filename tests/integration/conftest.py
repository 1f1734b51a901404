"""Integration test fixtures — real files under a temporary data directory."""

from __future__ import annotations

import pytest

from flatpay.core.config import AppSettings, StorageConfig
from flatpay.persistence import create_persistence


@pytest.fixture
def settings(tmp_path):
    return AppSettings(storage=StorageConfig(data_dir=str(tmp_path)))


@pytest.fixture
def persistence(settings):
    """(record_store, id_allocator) wired from settings."""
    return create_persistence(settings)

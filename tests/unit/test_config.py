"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

import logging

import pytest

from flatpay.core.config import AppSettings, StorageConfig
from flatpay.core.log import configure_logging


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.log_level == "INFO"
    assert settings.storage.id_ledger_file == "idControl.txt"


def test_storage_config_defaults():
    config = StorageConfig()
    assert config.data_dir == "."
    assert config.encoding == "utf-8"
    assert config.employees_file == "employees.txt"
    assert config.users_file == "users.txt"
    assert config.temp_prefix == "temp_"


def test_storage_env_override(monkeypatch):
    monkeypatch.setenv("FLATPAY_STORAGE_DATA_DIR", "/srv/payroll")
    monkeypatch.setenv("FLATPAY_STORAGE_EMPLOYEES_FILE", "empleados.txt")
    config = StorageConfig()
    assert config.data_dir == "/srv/payroll"
    assert config.employees_file == "empleados.txt"


@pytest.fixture
def restore_logging():
    package_logger = logging.getLogger("flatpay")
    root = logging.getLogger()
    saved_level = package_logger.level
    saved_handlers = list(root.handlers)
    yield
    package_logger.setLevel(saved_level)
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            root.removeHandler(handler)


def test_configure_logging_sets_package_level(restore_logging):
    configure_logging(AppSettings(log_level="debug"))
    assert logging.getLogger("flatpay").level == logging.DEBUG


def test_configure_logging_rejects_unknown_level(restore_logging):
    with pytest.raises(ValueError):
        configure_logging(AppSettings(log_level="LOUD"))

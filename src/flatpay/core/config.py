"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class StorageConfig(BaseSettings):
    """Flat-file storage configuration."""

    model_config = {"env_prefix": "FLATPAY_STORAGE_"}

    data_dir: str = "."
    encoding: str = "utf-8"
    id_ledger_file: str = "idControl.txt"  # shared by every table
    employees_file: str = "employees.txt"
    users_file: str = "users.txt"
    temp_prefix: str = "temp_"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "FLATPAY_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    storage: StorageConfig = StorageConfig()

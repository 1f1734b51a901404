"""Logging bootstrap for applications embedding the store."""

from __future__ import annotations

import logging

from flatpay.core.config import AppSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: AppSettings | None = None) -> None:
    """Apply ``settings.log_level`` to the ``flatpay`` logger tree."""
    if settings is None:
        settings = AppSettings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {settings.log_level!r}")
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("flatpay").setLevel(level)

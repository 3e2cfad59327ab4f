"""Tests for logging utilities."""

from __future__ import annotations

import logging

from msg_catalog.core.config import LoggingSettings
from msg_catalog.core.logging import configure_logging


def test_configure_logging_sets_root_level() -> None:
    """configure_logging should set the root logger level according to settings."""

    settings = LoggingSettings(level="DEBUG", structured=False)
    configure_logging(settings)
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("msg_catalog").level == logging.DEBUG


def test_configure_logging_accepts_lowercase_level() -> None:
    configure_logging(LoggingSettings(level="info", structured=True))
    assert logging.getLogger().level == logging.INFO

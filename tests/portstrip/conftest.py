"""Software-only simulation / demo - no real systems will be contacted or modified."""
from __future__ import annotations

import logging

import pytest
import structlog

from portstrip.config import get_settings


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for key in ("PORTSTRIP_LOG_LEVEL", "PORTSTRIP_LOG_JSON", "PORTSTRIP_DEMO_ADDRESSES"):
        monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture(autouse=True)
def reset_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    structlog.reset_defaults()
    logging.getLogger().setLevel(logging.WARNING)

"""Shared fixtures."""

import pytest

from config.settings import Settings
from compounder.share import MemoryClipboard


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep developer environment variables out of settings."""
    for key in (
        "CALC_STARTING_CAPITAL",
        "CALC_PROFIT_PER_TRADE",
        "CALC_NUM_TRADES",
        "SHARE_BASE_URL",
        "LOG_LEVEL",
        "LOG_FILE",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def clipboard() -> MemoryClipboard:
    return MemoryClipboard()

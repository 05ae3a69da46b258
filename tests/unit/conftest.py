from datetime import datetime, timedelta, UTC

import pytest
from pytest import MonkeyPatch

from ttlshortener.dao.memory import ShortURLMemoryDAO
from ttlshortener.models import ShortURLModel
from ttlshortener.utils.constants import ENV


NOW = datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: MonkeyPatch) -> None:
    """Ensure no application environment variable leaks into a test."""
    for group in (ENV.App, ENV.Store):
        for name in group:
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def dao() -> ShortURLMemoryDAO:
    """Provide an empty in-memory store with default settings."""
    return ShortURLMemoryDAO()


@pytest.fixture
def short_url(now: datetime) -> ShortURLModel:
    return ShortURLModel(
        target='https://example.com/article/123',
        shortcode='abc123',
        created_at=now,
        expires_at=now + timedelta(minutes=30),
    )

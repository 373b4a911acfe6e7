import pytest
from fastapi.testclient import TestClient

from emojified.core.cache import cache
from emojified.core.config import settings
from emojified.main import create_app


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Every test starts with auth off, a generous limit and empty buckets."""
    monkeypatch.setattr(settings, "API_KEY", None)
    monkeypatch.setattr(settings, "RATE_LIMIT_RPM", 10_000)
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


@pytest.fixture
def address() -> str:
    return "0x1234567890123456789012345678901234567890"

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from ptlist.config import Settings, get_settings
from ptlist.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def override_settings():
    """Replace the settings dependency for one test: ``override_settings(max_timestamps=5)``."""
    def _override(**kwargs):
        app.dependency_overrides[get_settings] = lambda: Settings(**kwargs)
    return _override


@pytest.fixture
def utc_local_zone(monkeypatch):
    """Pin the process local offset used by daily anchoring to UTC."""
    monkeypatch.setattr("ptlist.generators.daily.local_utc_offset", lambda ts: timedelta(0))

from __future__ import annotations

import datetime as dt

import pytest
from fastapi.testclient import TestClient

from pocketledger.api.deps import reset_dependencies
from pocketledger.repositories.store import InMemoryStore
from pocketledger.services.tracker import build_tracker

FIXED_NOW = dt.datetime(2024, 3, 15, 10, 30, tzinfo=dt.timezone.utc)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def now() -> dt.datetime:
    return FIXED_NOW


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
def tracker(store, clock):
    return build_tracker(store, clock=clock)


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("POCKETLEDGER_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("POCKETLEDGER_DATABASE_URL", raising=False)
    reset_dependencies()

    from pocketledger.api.main import app

    yield TestClient(app)
    reset_dependencies()

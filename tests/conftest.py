"""Shared test fixtures."""
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from scheduler import Scheduler
from server import create_app
from services import SchedulerStore

NOW = datetime(2025, 9, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def store() -> SchedulerStore:
    return SchedulerStore()


@pytest.fixture
def scheduler(store) -> Scheduler:
    """Scheduler whose clock is pinned to NOW."""
    return Scheduler(store, clock=lambda: NOW)


@pytest.fixture
def app(scheduler):
    return create_app(scheduler)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def make_person(client):
    def _create(name: str, email: str) -> dict:
        res = client.post("/persons", json={"name": name, "email": email})
        assert res.status_code == 201
        return res.json()
    return _create

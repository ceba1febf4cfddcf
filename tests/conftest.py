"""Shared fixtures for the InsureConnect test suite."""
import asyncio

import pytest
from fastapi.testclient import TestClient

from insureconnect_api.app.core.config import Settings
from insureconnect_api.app.core.db import Database
from insureconnect_api.app.main import create_app
from insureconnect_api.app.services.provider_service import ProviderService


def run(coro):
    """Drive a service coroutine to completion from a sync test."""
    return asyncio.run(coro)


@pytest.fixture
def settings():
    return Settings(database_url=":memory:", log_level="WARNING")


@pytest.fixture
def database():
    db = Database(":memory:")
    db.open()
    yield db
    db.close()


@pytest.fixture
def service(database):
    return ProviderService(database)


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(client):
    response = client.post("/api/seed")
    assert response.status_code == 200, response.text
    return client

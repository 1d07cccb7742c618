"""
Shared fixtures.

The application under test runs against an in-memory MongoDB
(mongomock) with rate limiting disabled.
"""

import mongomock
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from account_service.core.config import Settings
from account_service.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        mongo_uri="mongodb://localhost:27017",
        mongo_database="accounts_test",
        rate_limit_enabled=False,
    )


@pytest.fixture
def mongo_client() -> mongomock.MongoClient:
    return mongomock.MongoClient()


@pytest.fixture
def app(settings: Settings, mongo_client: mongomock.MongoClient) -> FastAPI:
    return create_app(settings, mongo_client)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)

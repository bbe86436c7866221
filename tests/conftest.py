"""
conftest.py — Shared test fixtures for the Users API

Every test gets its own UserStore and its own application, so records
created or deleted in one test never leak into another.

Called by: all test files via pytest autodiscovery
Depends on: users_api.app.main (create_app), users_api.app.services.user_store
"""

import pytest
from fastapi.testclient import TestClient

from users_api.app.core.config import Settings
from users_api.app.main import create_app
from users_api.app.services.user_store import UserStore


@pytest.fixture()
def store() -> UserStore:
    return UserStore()


@pytest.fixture()
def app_settings() -> Settings:
    return Settings(project_name="Users API", api_version="1.0.0", log_level="INFO")


@pytest.fixture()
def app(store, app_settings):
    return create_app(store=store, app_settings=app_settings)


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)

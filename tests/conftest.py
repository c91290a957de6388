# tests/conftest.py
from typing import Callable, Dict

import pytest
from fastapi.testclient import TestClient

from recipe_catalog_api.app.core.config import Settings
from recipe_catalog_api.app.main import create_app
from recipe_catalog_api.app.schemas.recipe import RecipeInput


@pytest.fixture
def settings() -> Settings:
    # Low iteration count keeps password hashing fast in tests.
    return Settings(
        secret_key="test-secret",
        password_hash_iterations=1_000,
        log_level="WARNING",
        admin_username="admin",
        admin_email="admin@example.com",
        admin_password="admin-pass",
    )


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture
def container(app):
    return app.state.container


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def register_and_login(client: TestClient) -> Callable[..., Dict[str, str]]:
    """Register a user and return the Authorization header for it."""

    def _login(username: str, password: str = "password123") -> Dict[str, str]:
        resp = client.post(
            "/api/v1/auth/register",
            json={"username": username, "email": f"{username}@example.com", "password": password},
        )
        assert resp.status_code == 201, resp.text
        return login(client, username, password)

    return _login


def login(client: TestClient, username: str, password: str) -> Dict[str, str]:
    resp = client.post("/api/v1/auth/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


def recipe_input(title: str, **kwargs) -> RecipeInput:
    return RecipeInput(title=title, **kwargs)

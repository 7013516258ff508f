"""Fixtures for API tests.

Each test builds its own app on a temporary SQLite file. The client is
entered as a context manager so the lifespan creates the schema.
"""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from warden.presentation.api import create_app
from warden.presentation.api.pipeline.policies import (
    DEFAULT_ROUTE_POLICIES,
    RoutePolicy,
)
from warden_config.settings import Settings

TEST_JWT_SECRET = "test-secret-key-for-api-tests-only"


@pytest.fixture
def api_settings(tmp_path):
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        database_url=f"sqlite+aiosqlite:///{tmp_path}/warden-api.db",
        environment="test",
        bcrypt_rounds=4,
        log_level="WARNING",
    )


@pytest.fixture
def client(api_settings):
    app = create_app(settings=api_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def idempotent_client(api_settings):
    """App whose profile update requires an ``X-Idempotency-Key``."""
    policies = dict(DEFAULT_ROUTE_POLICIES)
    policies["update_user"] = RoutePolicy(
        requires_auth=True,
        idempotency_operation="update-user",
    )
    app = create_app(settings=api_settings, route_policies=policies)
    with TestClient(app) as test_client:
        yield test_client


def signup(client, email="a@b.com", password="abcdef", name="A", role=None):
    body = {"email": email, "password": password, "name": name}
    if role is not None:
        body["role"] = role
    return client.post("/auth/signup", json=body)


def login(client, email="a@b.com", password="abcdef"):
    return client.post("/auth/login", json={"email": email, "password": password})


def token_for(client, email="a@b.com", password="abcdef", name="A", role=None):
    """Sign up (if needed) and return ``Authorization`` headers."""
    signup(client, email=email, password=password, name=name, role=role)
    response = login(client, email=email, password=password)
    assert response.status_code == 200, response.text
    token = response.json()["data"]["token"]
    return {"Authorization": f"Bearer {token}"}

import pytest
from fastapi.testclient import TestClient

from postdeck.core.postdeck import AppConfig, AppFactory
from postdeck.utils.helpers.jwt_helper import create_access_token


@pytest.fixture
def app(db):
    return AppFactory(AppConfig(app_env="test", allowed_origins=["http://localhost:3000"])).create()


@pytest.fixture
def client(app):
    # lifespan çalıştırılmaz; logger'lar testler boyunca açık kalır
    return TestClient(app)


@pytest.fixture
def auth_headers():
    def _headers(user):
        token, _ = create_access_token(user_id=user.id, email=user.email)
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest.fixture
def graphql(client):
    """POST /graphql, JSON gövdesini döner."""
    def _execute(query, variables=None, headers=None):
        response = client.post("/graphql", json={"query": query, "variables": variables or {}}, headers=headers or {})
        assert response.status_code == 200
        return response.json()
    return _execute

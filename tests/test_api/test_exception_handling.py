import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from postdeck.api.middleware import register_postdeck_handlers, build_error_response
from postdeck.core.exceptions import PostDeckException, DatabaseResourceNotFoundError
from postdeck.core.exceptions.error_levels import ErrorDetailLevel, get_error_level_from_env


class Payload(BaseModel):
    name: str


@pytest.fixture
def error_client():
    app = FastAPI()
    register_postdeck_handlers(app)

    @app.get("/not-found")
    async def not_found():
        raise DatabaseResourceNotFoundError(resource_name="Post", resource_id="PST-1")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    @app.post("/payload")
    async def payload(body: Payload):
        return body

    return TestClient(app, raise_server_exceptions=False)


def test_postdeck_exception_response(error_client):
    response = error_client.get("/not-found")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"]["error_code"] == "DATABASE_RESOURCE_NOT_FOUND"
    assert body["error"]["error_message"] == "Post 'PST-1' not found"
    assert body["error"]["error_details"] == {"resource_name": "Post", "resource_id": "PST-1"}
    assert "traceback" not in body["error"]


def test_validation_error_response(error_client):
    response = error_client.post("/payload", json={})

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["error_code"] == "VALIDATION_ERROR"
    assert error["error_details"]["errors"][0]["loc"] == ["body", "name"]


def test_unhandled_exception_response(error_client):
    response = error_client.get("/boom")

    assert response.status_code == 500
    error = response.json()["error"]
    assert error["error_code"] == "INTERNAL_ERROR"
    assert error["error_details"]["cause_type"] == "RuntimeError"


def test_minimal_level_hides_details():
    exc = DatabaseResourceNotFoundError(resource_name="Post", resource_id="PST-1")

    response = build_error_response(exc, level=ErrorDetailLevel.MINIMAL)

    assert response.status_code == 404
    assert b"error_details" not in response.body


@pytest.mark.parametrize("app_env,level", [
    ("dev", ErrorDetailLevel.FULL),
    ("local", ErrorDetailLevel.FULL),
    ("test", ErrorDetailLevel.STANDARD),
    ("stage", ErrorDetailLevel.STANDARD),
    ("prod", ErrorDetailLevel.MINIMAL),
    ("", ErrorDetailLevel.MINIMAL),
])
def test_error_level_from_env(app_env, level):
    assert get_error_level_from_env(app_env) is level


def test_exception_to_dict_includes_cause():
    exc = PostDeckException(error_message="failed", cause=ValueError("bad"))

    data = exc.to_dict()

    assert data["error_message"] == "failed"
    assert data["error_details"] == {"cause": "bad", "cause_type": "ValueError"}

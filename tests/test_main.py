"""
Tests for the main application endpoints.
"""
import asyncio

from fastapi.testclient import TestClient
from starlette.requests import Request

from woundashare.exceptions import NotFoundException, app_exception_handler, unhandled_exception_handler
from woundashare.main import app


async def _failing_endpoint():
    raise RuntimeError("database on fire")


app.add_api_route("/test-only/runtime-error", _failing_endpoint, methods=["GET"], include_in_schema=False)


def test_root_endpoint(client):
    """
    Test the root endpoint returns a welcome message.
    """
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert "message" in data
    assert "version" in data


def test_health_check(client):
    """
    Test the health check endpoint returns a healthy status.
    """
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "reports" in data


def test_responses_carry_request_id(client):
    response = client.get("/health")
    assert response.headers.get("X-Request-ID")
    assert "X-Process-Time" in response.headers


def test_request_validation_errors_are_reported(patient_client):
    response = patient_client.post("/api/v1/reports", json={"title": "Cut"})
    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "invalid_input"
    assert data["errors"]


def test_app_exception_renders_error_code():
    request = Request({"type": "http", "method": "GET", "path": "/x", "headers": [], "query_string": b""})
    response = asyncio.run(app_exception_handler(request, NotFoundException("Report 9 not found")))
    assert response.status_code == 404
    assert b'"error":"not_found"' in response.body


def test_unexpected_errors_become_generic_500():
    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/test-only/runtime-error")
    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "internal_error"
    assert data["detail"] == "Something went wrong. Please try again."
    assert "database on fire" not in response.text


def test_unhandled_exception_handler_hides_details():
    request = Request({"type": "http", "method": "GET", "path": "/x", "headers": [], "query_string": b""})
    response = asyncio.run(unhandled_exception_handler(request, RuntimeError("secret stack detail")))
    assert response.status_code == 500
    assert b'"error":"internal_error"' in response.body
    assert b"secret stack detail" not in response.body

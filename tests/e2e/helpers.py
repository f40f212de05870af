"""Shared helpers for end-to-end tests."""

from fastapi.testclient import TestClient

from connector.interface.api.app import create_app
from tests.di import build_test_container


def make_client() -> TestClient:
    """Test client over a fresh app whose container uses mocks only.

    In-memory state lives as long as the container, so it is shared by
    every request made through one client.
    """
    return TestClient(create_app(container=build_test_container()))


def register(
    client: TestClient, name: str, email: str, password: str = "secret123"
) -> dict[str, str]:
    """Register an account and return headers authenticating as it."""
    response = client.post(
        "/users", json={"name": name, "email": email, "password": password}
    )
    assert response.status_code == 200, response.text
    return {"x-auth-token": response.json()["token"]}


def whoami(client: TestClient, headers: dict[str, str]) -> dict:
    response = client.get("/auth", headers=headers)
    assert response.status_code == 200, response.text
    return response.json()

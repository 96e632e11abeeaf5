"""Shared helpers for API tests."""

from fastapi.testclient import TestClient

FRONTEND = "http://localhost:8000"


def register(client: TestClient, username: str) -> None:
    """Register and log in ``username`` on ``client``."""
    response = client.post("/auth/register", data={"username": username})
    assert response.status_code == 303
    assert response.headers["location"] == f"{FRONTEND}/"

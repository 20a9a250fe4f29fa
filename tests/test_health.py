"""Tests for the health endpoint and app wiring."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from src.task_planner.config import settings
from src.task_planner.main import create_app


def test_health_reports_service(client: TestClient) -> None:
    """Test that health returns status, name, version and environment."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "service": "task-planner-service",
        "version": "0.1.0",
        "environment": settings.environment,
    }


def test_docs_hidden_outside_debug(client: TestClient) -> None:
    """Test that interactive docs are not served by default."""
    assert client.get("/docs").status_code == 404


def test_docs_served_in_debug() -> None:
    """Test that a debug app serves interactive docs."""
    with patch.object(settings, "debug", True):
        debug_client = TestClient(create_app())

    assert debug_client.get("/docs").status_code == 200


def test_task_routes_are_mounted_under_tasks(client: TestClient) -> None:
    """Test that parse routes live under the /tasks prefix."""
    assert client.post("/parse", json={"text": "Buy milk"}).status_code == 404
    assert client.post("/tasks/parse", json={"text": "Buy milk"}).status_code == 200

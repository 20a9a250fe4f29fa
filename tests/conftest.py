"""Shared test fixtures."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from src.task_planner.main import app


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def today() -> date:
    """Fixed reference date for end-date year inference."""
    return date(2026, 10, 17)

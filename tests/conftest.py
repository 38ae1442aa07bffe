"""Pytest fixtures for running the API without a MongoDB server."""

import pytest
from fastapi.testclient import TestClient

from employee_service.dependencies import get_employee_repository
from employee_service.main import app
from employee_service.repositories import InMemoryEmployeeRepository


@pytest.fixture
def repository(request):
    """Provide a fresh in-memory repository, or the one passed via indirect parametrize."""
    return getattr(request, 'param', None) or InMemoryEmployeeRepository()


@pytest.fixture
def client(repository):
    """Test client whose routes use the in-memory repository.

    The client is not entered as a context manager, so the lifespan
    (MongoDB connect and init) never runs.
    """
    app.dependency_overrides[get_employee_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_employee_data():
    return {"name": "Alice", "email": "a@x.com", "department": "Eng"}

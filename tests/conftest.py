"""
Test configuration for the wound report service.
"""
import os

# Settings are read at import time, so the environment must be ready first
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["LATENCY_SCALE"] = "0"

import pytest
from fastapi.testclient import TestClient

from woundashare.auth.service import PrincipalDirectory
from woundashare.database import get_principal_directory, get_report_repository
from woundashare.main import app
from woundashare.reports.repository import InMemoryReportRepository
from woundashare.reports.seed import demo_reports

ADMIN_CREDENTIALS = {"email": "admin@woundashare.com", "password": "admin123"}
PATIENT_CREDENTIALS = {"email": "user@example.com", "password": "user123"}


@pytest.fixture(scope="function")
def repository():
    """
    Empty report repository.
    """
    return InMemoryReportRepository()


@pytest.fixture(scope="function")
def seeded_repository():
    """
    Report repository holding the two demo reports.
    """
    return InMemoryReportRepository(demo_reports())


@pytest.fixture(scope="function")
def directory():
    return PrincipalDirectory(seed=True)


@pytest.fixture(scope="function")
def client(seeded_repository, directory):
    """
    Create a test client backed by fresh in-memory stores.
    """
    app.dependency_overrides[get_report_repository] = lambda: seeded_repository
    app.dependency_overrides[get_principal_directory] = lambda: directory
    
    with TestClient(app) as client:
        yield client
    
    # Remove dependency overrides
    app.dependency_overrides = {}


@pytest.fixture(scope="function")
def patient_client(client):
    """
    Test client logged in (session cookie) as the demo patient.
    """
    response = client.post("/api/v1/auth/login", json=PATIENT_CREDENTIALS)
    assert response.status_code == 200
    return client


@pytest.fixture(scope="function")
def admin_client(client):
    """
    Test client logged in (session cookie) as the demo admin.
    """
    response = client.post("/api/v1/auth/login", json=ADMIN_CREDENTIALS)
    assert response.status_code == 200
    return client

"""
Shared fixtures.

The app reads its settings at import time, so the environment is pointed
at a throwaway SQLite file before anything from `app` is imported.
"""
import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="leads-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["ADMIN_EMAIL"] = "admin@agency.dz"
os.environ["ADMIN_PASSWORD"] = "admin-password-123"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["SERVICE_CAPACITY"] = "15"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import delete

from app.main import app
from app.db.postgres import get_db_session
from app.models import AdminUser, Candidate

ADMIN_EMAIL = os.environ["ADMIN_EMAIL"]
ADMIN_PASSWORD = os.environ["ADMIN_PASSWORD"]

LEAD = {
    "full_name": "Amina Benali",
    "service_type": "web",
    "study_level": "master",
    "email": "amina.benali@univ-alger.dz",
    "phone": "+213 555 12 34 56",
    "message": "Application mobile de gestion de bibliothèque pour mon PFE.",
}


@pytest.fixture
def client():
    # Entering the client runs the lifespan: tables + bootstrap admin
    with TestClient(app) as c:
        yield c
    with get_db_session() as db:
        db.execute(delete(Candidate))
        db.execute(delete(AdminUser))


@pytest.fixture
def auth_headers(client):
    response = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def submit_lead(client):
    """Post a landing page lead; keyword arguments override the default form."""
    def _submit(**overrides):
        return client.post("/api/leads", json={**LEAD, **overrides})
    return _submit

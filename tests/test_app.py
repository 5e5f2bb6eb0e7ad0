from sqlalchemy.exc import OperationalError

from app.services.candidate_service import CandidateService


def test_landing_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "lead-form" in response.text


def test_admin_pages(client):
    for path in ("/admin", "/admin/dashboard"):
        response = client.get(path)
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]


def test_static_assets(client):
    assert client.get("/static/style.css").status_code == 200


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy", "database": "connected"}


def test_database_error_is_503(client, auth_headers, monkeypatch):
    def broken(self, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr(CandidateService, "list_candidates", broken)
    response = client.get("/api/candidates", headers=auth_headers)
    assert response.status_code == 503
    assert response.json() == {"detail": "Database unavailable"}

from tests.conftest import LEAD


def test_submit_lead(client, submit_lead, auth_headers):
    response = submit_lead()
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["candidate_id"]

    candidate = client.get(f"/api/candidates/{body['candidate_id']}", headers=auth_headers).json()
    assert candidate["status"] == "pending"
    assert candidate["notes"] is None
    assert candidate["email"] == LEAD["email"]


def test_budget_follows_service(client, submit_lead, auth_headers):
    web = submit_lead().json()["candidate_id"]
    writing = submit_lead(
        service_type="writing", email="yacine@mail.dz", phone="0661 00 00 01"
    ).json()["candidate_id"]

    assert client.get(f"/api/candidates/{web}", headers=auth_headers).json()["budget"] == "25000-50000"
    assert client.get(f"/api/candidates/{writing}", headers=auth_headers).json()["budget"] == "5000-10000"


def test_explicit_budget_is_kept(client, submit_lead, auth_headers):
    candidate_id = submit_lead(budget="5000-10000").json()["candidate_id"]
    assert client.get(f"/api/candidates/{candidate_id}", headers=auth_headers).json()["budget"] == "5000-10000"


def test_duplicate_email_rejected(submit_lead):
    assert submit_lead().status_code == 201

    response = submit_lead(phone="0770 11 22 33")
    assert response.status_code == 409
    assert response.json()["detail"]["field"] == "email"


def test_duplicate_email_ignores_case(submit_lead):
    assert submit_lead().status_code == 201

    response = submit_lead(email=LEAD["email"].upper(), phone="0770 11 22 33")
    assert response.status_code == 409
    assert response.json()["detail"]["field"] == "email"


def test_duplicate_phone_rejected(submit_lead):
    assert submit_lead().status_code == 201

    response = submit_lead(email="other@mail.dz", phone="  " + LEAD["phone"] + " ")
    assert response.status_code == 409
    assert response.json()["detail"]["field"] == "phone"


def test_email_reported_when_both_collide(submit_lead):
    assert submit_lead().status_code == 201
    assert submit_lead().json()["detail"]["field"] == "email"


def test_missing_field_rejected(client):
    payload = {k: v for k, v in LEAD.items() if k != "phone"}
    assert client.post("/api/leads", json=payload).status_code == 422


def test_blank_fields_rejected(submit_lead):
    assert submit_lead(full_name="   ").status_code == 422
    assert submit_lead(message="").status_code == 422
    assert submit_lead(phone="   ").status_code == 422


def test_invalid_values_rejected(submit_lead):
    assert submit_lead(email="not-an-email").status_code == 422
    assert submit_lead(service_type="design").status_code == 422
    assert submit_lead(study_level="doctorat").status_code == 422
    assert submit_lead(phone="call me").status_code == 422


def test_public_cannot_set_status(client, submit_lead, auth_headers):
    candidate_id = submit_lead(status="completed", notes="vip").json()["candidate_id"]

    candidate = client.get(f"/api/candidates/{candidate_id}", headers=auth_headers).json()
    assert candidate["status"] == "pending"
    assert candidate["notes"] is None

import pytest
from fastapi.testclient import TestClient

from backend.app.core.security import get_password_hash
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine
from backend.app.main import app
from backend.app.models.organization import Organization
from backend.app.models.user import User

ORG_PAYLOAD = {
    "org_name": "Bright Futures",
    "org_type": "nonprofit",
    "contact_person_name": "Ada Park",
    "contact_email": "ada@brightfutures.org",
    "contact_phone": "555-0100",
    "city": "Austin",
    "state": "tx",
    "description": "After school programs",
    "services_offered": "Tutoring",
    "business_id": "EIN-12345",
    "grades_served": ["9", "10"],
    "website_url": "https://brightfutures.org",
}


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def register_and_login(client: TestClient, email: str, password: str = "secret", role: str = "org") -> str:
    client.post("/auth/register", json={"email": email, "password": password, "role": role})
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return response.json()["access_token"]


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def admin_token(client: TestClient) -> str:
    with SessionLocal() as db:
        db.add(User(email="admin@example.com", hashed_password=get_password_hash("secret"), role="admin"))
        db.commit()
    response = client.post("/auth/login", json={"email": "admin@example.com", "password": "secret"})
    return response.json()["access_token"]


def set_status(organization_id: int, status: str) -> None:
    with SessionLocal() as db:
        org = db.query(Organization).filter(Organization.id == organization_id).first()
        org.status = status
        db.commit()


def test_register_organization_starts_pending():
    client = TestClient(app)
    token = register_and_login(client, "org@example.com")
    response = client.post("/organizations", json=ORG_PAYLOAD, headers=auth(token))
    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "pending"
    assert data["approved"] is False
    assert data["state"] == "TX"
    assert data["grades_served"] == ["9", "10"]


def test_register_twice_conflicts():
    client = TestClient(app)
    token = register_and_login(client, "org@example.com")
    client.post("/organizations", json=ORG_PAYLOAD, headers=auth(token))
    response = client.post("/organizations", json=ORG_PAYLOAD, headers=auth(token))
    assert response.status_code == 409


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"grades_served": []}, "grades_served"),
        ({"business_id": "AB"}, "business_id"),
        ({"state": "XX"}, "state"),
        ({"city": "  "}, "city"),
    ],
)
def test_register_validation(overrides, field):
    client = TestClient(app)
    token = register_and_login(client, "org@example.com")
    response = client.post("/organizations", json={**ORG_PAYLOAD, **overrides}, headers=auth(token))
    assert response.status_code == 400
    assert response.json()["fields"] == [field]


def test_students_cannot_register_organizations():
    client = TestClient(app)
    token = register_and_login(client, "student@example.com", role="student")
    assert client.post("/organizations", json=ORG_PAYLOAD, headers=auth(token)).status_code == 403


def test_status_reports_message():
    client = TestClient(app)
    token = register_and_login(client, "org@example.com")
    assert client.get("/organizations/me/status", headers=auth(token)).status_code == 404

    client.post("/organizations", json=ORG_PAYLOAD, headers=auth(token))
    body = client.get("/organizations/me/status", headers=auth(token)).json()
    assert body["exists"] is True
    assert body["status"] == "pending"
    assert body["status_message"] == "Please verify your email to continue"


def test_admin_lists_pending_and_approved():
    client = TestClient(app)
    first = register_and_login(client, "first@example.com")
    second = register_and_login(client, "second@example.com")
    approved_id = client.post("/organizations", json=ORG_PAYLOAD, headers=auth(first)).json()["id"]
    client.post("/organizations", json={**ORG_PAYLOAD, "org_name": "Second"}, headers=auth(second))
    set_status(approved_id, "approved")

    response = client.get("/admin/organizations", headers=auth(admin_token(client)))
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert [org["id"] for org in body["approved"]] == [approved_id]
    assert [org["org_name"] for org in body["pending"]] == ["Second"]


def test_admin_cannot_approve_before_email_verified():
    client = TestClient(app)
    token = register_and_login(client, "org@example.com")
    organization_id = client.post("/organizations", json=ORG_PAYLOAD, headers=auth(token)).json()["id"]
    response = client.patch(
        f"/admin/organizations/{organization_id}", json={"approved": True}, headers=auth(admin_token(client))
    )
    assert response.status_code == 400


def test_admin_approves_and_unapproves():
    client = TestClient(app)
    token = register_and_login(client, "org@example.com")
    organization_id = client.post("/organizations", json=ORG_PAYLOAD, headers=auth(token)).json()["id"]
    set_status(organization_id, "email_verified")
    admin = admin_token(client)

    response = client.patch(f"/admin/organizations/{organization_id}", json={"approved": True}, headers=auth(admin))
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Organization approved successfully"
    assert body["organization"]["status"] == "approved"
    assert body["organization"]["approved"] is True

    response = client.patch(f"/admin/organizations/{organization_id}", json={"approved": False}, headers=auth(admin))
    assert response.json()["message"] == "Organization unapproved successfully"
    assert response.json()["organization"]["status"] == "rejected"

    status_body = client.get("/organizations/me/status", headers=auth(token)).json()
    assert status_body["status_message"] == "Your application was not approved"


def test_admin_review_unknown_organization_returns_404():
    client = TestClient(app)
    response = client.patch("/admin/organizations/404", json={"approved": True}, headers=auth(admin_token(client)))
    assert response.status_code == 404


def test_non_admin_cannot_review():
    client = TestClient(app)
    token = register_and_login(client, "org@example.com")
    assert client.get("/admin/organizations", headers=auth(token)).status_code == 403

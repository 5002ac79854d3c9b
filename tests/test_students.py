import pytest
from fastapi.testclient import TestClient

from backend.app.db.base import Base
from backend.app.db.session import engine
from backend.app.main import app
from backend.app.schemas.choices import CATEGORIES

PROFILE = {
    "first_name": "Maya",
    "last_name": "Lopez",
    "date_of_birth": "2009-04-02",
    "school": "Lincoln High",
    "grade_level": "11",
    "gpa": 3.8,
    "age_verified": True,
}


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def register_and_login(client: TestClient, email: str, password: str = "secret", role: str = "student") -> str:
    client.post("/auth/register", json={"email": email, "password": password, "role": role})
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return response.json()["access_token"]


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def interests_payload(count: int = 5, priority: int = 3, preferences=None) -> dict:
    return {
        "interests": [
            {"category": category, "is_priority": index < priority}
            for index, category in enumerate(CATEGORIES[:count])
        ],
        "opportunity_preferences": preferences if preferences is not None else [{"preference_type": "internship"}],
    }


def test_create_profile():
    client = TestClient(app)
    token = register_and_login(client, "maya@example.com")
    response = client.post("/students/profile", json=PROFILE, headers=auth(token))
    assert response.status_code == 201
    data = response.json()
    assert data["first_name"] == "Maya"
    assert data["grade_level"] == "11"
    assert data["gpa"] == 3.8
    assert data["onboarding_completed"] is False


def test_profile_requires_age_verification():
    client = TestClient(app)
    token = register_and_login(client, "young@example.com")
    response = client.post("/students/profile", json={**PROFILE, "age_verified": False}, headers=auth(token))
    assert response.status_code == 400
    assert response.json()["fields"] == ["age_verified"]


def test_profile_rejects_unknown_grade():
    client = TestClient(app)
    token = register_and_login(client, "grade@example.com")
    response = client.post("/students/profile", json={**PROFILE, "grade_level": "13"}, headers=auth(token))
    assert response.status_code == 400


def test_duplicate_profile_conflicts():
    client = TestClient(app)
    token = register_and_login(client, "maya@example.com")
    client.post("/students/profile", json=PROFILE, headers=auth(token))
    response = client.post("/students/profile", json=PROFILE, headers=auth(token))
    assert response.status_code == 409


def test_get_profile_before_creation_returns_404():
    client = TestClient(app)
    token = register_and_login(client, "nobody@example.com")
    assert client.get("/students/profile", headers=auth(token)).status_code == 404


def test_update_profile_partial():
    client = TestClient(app)
    token = register_and_login(client, "maya@example.com")
    client.post("/students/profile", json=PROFILE, headers=auth(token))
    response = client.put("/students/profile", json={"school": "Roosevelt High", "grade_level": "12"}, headers=auth(token))
    assert response.status_code == 200
    data = response.json()
    assert data["school"] == "Roosevelt High"
    assert data["grade_level"] == "12"
    assert data["first_name"] == "Maya"


def test_org_users_cannot_use_student_profile():
    client = TestClient(app)
    token = register_and_login(client, "org@example.com", role="org")
    assert client.post("/students/profile", json=PROFILE, headers=auth(token)).status_code == 403


def test_save_interests_completes_onboarding():
    client = TestClient(app)
    token = register_and_login(client, "maya@example.com")
    client.post("/students/profile", json=PROFILE, headers=auth(token))
    payload = interests_payload(
        preferences=[
            {"preference_type": "internship"},
            {"preference_type": "other", "other_description": "  Hackathons  "},
        ]
    )
    response = client.put("/students/interests", json=payload, headers=auth(token))
    assert response.status_code == 200
    data = response.json()
    assert data["onboarding_completed"] is True
    assert [item["category"] for item in data["interests"]] == list(CATEGORIES[:5])
    assert sum(item["is_priority"] for item in data["interests"]) == 3
    other = [item for item in data["opportunity_preferences"] if item["preference_type"] == "other"]
    assert other[0]["other_description"] == "Hackathons"

    assert client.get("/students/profile", headers=auth(token)).json()["onboarding_completed"] is True


def test_saving_interests_replaces_previous_selection():
    client = TestClient(app)
    token = register_and_login(client, "maya@example.com")
    client.post("/students/profile", json=PROFILE, headers=auth(token))
    client.put("/students/interests", json=interests_payload(count=7, priority=5), headers=auth(token))
    client.put("/students/interests", json=interests_payload(count=5, priority=3), headers=auth(token))
    data = client.get("/students/interests", headers=auth(token)).json()
    assert len(data["interests"]) == 5


def test_saved_interests_drive_the_feed():
    client = TestClient(app)
    token = register_and_login(client, "maya@example.com")
    client.post("/students/profile", json=PROFILE, headers=auth(token))
    client.put("/students/interests", json=interests_payload(), headers=auth(token))
    body = client.get("/opportunities/student-feed", headers=auth(token)).json()
    assert body["preferences"]["categories"] == list(CATEGORIES[:5])
    assert body["preferences"]["preference_types"] == ["internship"]


@pytest.mark.parametrize(
    "payload",
    [
        interests_payload(count=4),
        interests_payload(count=5, priority=2),
        interests_payload(count=7, priority=6),
        interests_payload(preferences=[]),
        interests_payload(preferences=[{"preference_type": "program"}, {"preference_type": "program"}]),
    ],
)
def test_interest_rules(payload):
    client = TestClient(app)
    token = register_and_login(client, "maya@example.com")
    client.post("/students/profile", json=PROFILE, headers=auth(token))
    response = client.put("/students/interests", json=payload, headers=auth(token))
    assert response.status_code == 400


def test_duplicate_interest_category_rejected():
    client = TestClient(app)
    token = register_and_login(client, "maya@example.com")
    client.post("/students/profile", json=PROFILE, headers=auth(token))
    payload = interests_payload()
    payload["interests"][1]["category"] = payload["interests"][0]["category"]
    response = client.put("/students/interests", json=payload, headers=auth(token))
    assert response.status_code == 400
    assert response.json()["fields"] == ["interests"]


def test_interests_need_a_profile():
    client = TestClient(app)
    token = register_and_login(client, "maya@example.com")
    response = client.put("/students/interests", json=interests_payload(), headers=auth(token))
    assert response.status_code == 404


def test_blank_profile_fields_listed():
    client = TestClient(app)
    token = register_and_login(client, "blank@example.com")
    response = client.post("/students/profile", json={**PROFILE, "first_name": " ", "school": ""}, headers=auth(token))
    assert response.status_code == 400
    assert response.json() == {"detail": "Missing required fields: first_name, school", "fields": ["first_name", "school"]}

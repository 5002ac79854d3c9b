from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from backend.app.core.time import utc_today
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine
from backend.app.main import app
from backend.app.models.opportunity import Opportunity


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


def add_opportunity(db, **overrides) -> Opportunity:
    values = {
        "created_by": 1,
        "opportunity_name": "Robotics Camp",
        "brief_description": "Build and program robots",
        "category": "stem_innovation",
        "opportunity_type": "program",
        "location_type": "online",
        "application_deadline": utc_today() + timedelta(days=10),
        "application_url": "https://example.org/apply",
        "contact_info": "hello@example.org",
        "is_active": True,
    }
    values.update(overrides)
    opportunity = Opportunity(**values)
    db.add(opportunity)
    db.commit()
    return opportunity


def explore(client: TestClient, token: str, **params):
    response = client.get("/opportunities/student-explore", params=params, headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    return response.json()


def names(body: dict) -> list[str]:
    return [item["opportunity_name"] for item in body["data"]]


def test_explore_requires_authentication():
    client = TestClient(app)
    assert client.get("/opportunities/student-explore").status_code == 401


def test_explore_open_to_any_signed_in_role():
    client = TestClient(app)
    token = register_and_login(client, "org@example.com", role="org")
    body = explore(client, token)
    assert body == {"data": [], "page": 1, "pageSize": 50, "hasMore": False}


def test_explore_search_matches_name_or_description_case_insensitively():
    client = TestClient(app)
    token = register_and_login(client, "student@example.com")
    with SessionLocal() as db:
        add_opportunity(db, opportunity_name="Marine Biology Lab", brief_description="Field work")
        add_opportunity(db, opportunity_name="Debate Club", brief_description="Learn MARINE policy")
        add_opportunity(db, opportunity_name="Pottery", brief_description="Clay")

    assert sorted(names(explore(client, token, search="marine"))) == ["Debate Club", "Marine Biology Lab"]


def test_explore_search_treats_wildcards_literally():
    client = TestClient(app)
    token = register_and_login(client, "student@example.com")
    with SessionLocal() as db:
        add_opportunity(db, opportunity_name="100% online tutoring")
        add_opportunity(db, opportunity_name="1000 volunteer hours")

    assert names(explore(client, token, search="100%")) == ["100% online tutoring"]
    assert names(explore(client, token, search="_")) == []


def test_explore_category_and_location_are_anded():
    client = TestClient(app)
    token = register_and_login(client, "student@example.com")
    with SessionLocal() as db:
        add_opportunity(db, opportunity_name="Austin arts", category="arts_design", location_type="in_person", location_address="12 Main St, Austin", location_state="TX")
        add_opportunity(db, opportunity_name="Boston arts", category="arts_design", location_type="in_person", location_address="1 Elm St, Boston", location_state="MA")
        add_opportunity(db, opportunity_name="Austin stem", category="stem_innovation", location_type="in_person", location_address="5 Oak St, Austin", location_state="TX")

    assert names(explore(client, token, category="arts_design", location="austin")) == ["Austin arts"]
    assert names(explore(client, token, location="MA")) == ["Boston arts"]


def test_explore_blank_filters_are_ignored():
    client = TestClient(app)
    token = register_and_login(client, "student@example.com")
    with SessionLocal() as db:
        add_opportunity(db, opportunity_name="Only one")

    assert names(explore(client, token, search="   ", category="", location=" ")) == ["Only one"]


def test_explore_hides_expired_and_inactive():
    client = TestClient(app)
    token = register_and_login(client, "student@example.com")
    with SessionLocal() as db:
        add_opportunity(db, opportunity_name="expired", application_deadline=utc_today() - timedelta(days=3))
        add_opportunity(db, opportunity_name="inactive", is_active=False)
        add_opportunity(db, opportunity_name="visible")

    assert names(explore(client, token)) == ["visible"]


def test_explore_page_size_clamped_and_has_more():
    client = TestClient(app)
    token = register_and_login(client, "student@example.com")
    with SessionLocal() as db:
        add_opportunity(db, opportunity_name="first", application_deadline=utc_today())
        add_opportunity(db, opportunity_name="second", application_deadline=utc_today() + timedelta(days=1))

    body = explore(client, token, pageSize=0)
    assert body["pageSize"] == 1
    assert names(body) == ["first"]
    assert body["hasMore"] is True

    body = explore(client, token, page=2, pageSize=1)
    assert names(body) == ["second"]

    assert explore(client, token, pageSize=1000)["pageSize"] == 100


def test_explore_category_and_search_must_both_match():
    client = TestClient(app)
    token = register_and_login(client, "student@example.com")
    with SessionLocal() as db:
        add_opportunity(db, opportunity_name="Robotics League", category="stem_innovation")
        add_opportunity(db, opportunity_name="Mural Workshop", category="arts_design")

    assert names(explore(client, token, category="arts_design", search="robotics")) == []
    assert names(explore(client, token, search="robotics")) == ["Robotics League"]


def test_explore_pages_are_disjoint_and_follow_deadline_order():
    client = TestClient(app)
    token = register_and_login(client, "student@example.com")
    today = utc_today()
    with SessionLocal() as db:
        # Deadlines repeat every five rows so ties fall back to id order
        for index in range(25):
            add_opportunity(db, opportunity_name=f"opp {index:02d}", application_deadline=today + timedelta(days=index % 5))

    everything = explore(client, token, pageSize=100)
    ordered_ids = [item["id"] for item in everything["data"]]
    keys = [(item["application_deadline"], item["id"]) for item in everything["data"]]
    assert keys == sorted(keys)
    assert len(ordered_ids) == 25

    first = explore(client, token, page=1, pageSize=10)
    second = explore(client, token, page=2, pageSize=10)
    first_ids = [item["id"] for item in first["data"]]
    second_ids = [item["id"] for item in second["data"]]
    assert not set(first_ids) & set(second_ids)
    assert first_ids + second_ids == ordered_ids[:20]
    assert first["hasMore"] is True and second["hasMore"] is True

    third = explore(client, token, page=3, pageSize=10)
    assert [item["id"] for item in third["data"]] == ordered_ids[20:]
    assert third["hasMore"] is False

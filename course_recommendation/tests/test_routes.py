"""
Test the recommendation API routes with FastAPI's TestClient.
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from db import get_db
from main import app
from models.models_user import User
from course_recommendation import config
from course_recommendation.logic import Course, EnrollmentSource
from course_recommendation.routes import get_source
from course_recommendation.presentation.strings import get_string

TARGET = 1
GUEST = 50

COURSES = [
    Course(id=1, fullname="Python Basics", category_id=1, category_name="Programming"),
    Course(id=2, fullname="Data Structures", category_id=1, category_name="Programming",
           summary="<p>Trees and graphs</p>"),
    Course(id=3, fullname="Statistics", category_id=2, category_name="Mathematics"),
]

ENROLLMENTS = [(TARGET, 1), (2, 1), (2, 2), (3, 1), (3, 3), (4, 3)]


@pytest.fixture
def client(seed):
    session = seed(COURSES, ENROLLMENTS, guest_ids=[GUEST])

    def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app), session
    finally:
        app.dependency_overrides.clear()


def issue_token(sub, expires_delta=timedelta(days=7)):
    """Sign a viewer token the way the host platform does."""
    now = datetime.now(timezone.utc)
    payload = {"sub": sub, "iat": now, "exp": now + expires_delta}
    return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALG)


def auth(user_id):
    return {"Authorization": f"Bearer {issue_token(str(user_id))}"}


def test_health(client):
    http, _ = client
    assert http.get("/health").json() == {"status": "ok"}
    body = http.get("/recommendations/health").json()
    assert body["status"] == "ok"
    assert body["engine"] == "course_recommendation"


def test_block_requires_login(client):
    http, _ = client
    response = http.get("/recommendations/block")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert response.text == get_string("login_required")


def test_block_guest_and_bad_tokens(client):
    http, _ = client
    expired = issue_token(str(TARGET), expires_delta=timedelta(seconds=-10))

    assert http.get("/recommendations/block", headers=auth(GUEST)).text == get_string("login_required")
    assert http.get("/recommendations/block", headers={"Authorization": "Bearer not-a-jwt"}).text == \
        get_string("login_required")
    assert http.get("/recommendations/block", headers={"Authorization": f"Bearer {expired}"}).text == \
        get_string("login_required")
    assert http.get("/recommendations/block", headers=auth(999)).text == get_string("login_required")


def test_block_suspended_user(client):
    http, session = client
    user = session.get(User, TARGET)
    user.suspended = 1
    session.commit()

    assert http.get("/recommendations/block", headers=auth(TARGET)).text == get_string("login_required")


def test_block_renders_recommendations(client):
    http, _ = client
    response = http.get("/recommendations/block", headers=auth(TARGET))

    assert response.status_code == 200
    assert "dashboard-card-deck" in response.text
    assert "Data Structures" in response.text
    assert "Statistics" in response.text
    assert "Python Basics" not in response.text
    assert response.text.index("Data Structures") < response.text.index("Statistics")


def test_block_is_per_user(client):
    http, _ = client

    # user 4 only shares Statistics with user 3, whose other course is Python Basics
    response = http.get("/recommendations/block", headers=auth(4))
    assert "Python Basics" in response.text
    assert "Statistics" not in response.text


def test_block_user_without_enrollments(client):
    http, session = client
    session.add(User(id=77, username="newcomer", email="newcomer@example.org"))
    session.commit()

    response = http.get("/recommendations/block", headers=auth(77), params={"lang": "es"})
    assert response.text == get_string("no_recommendations", "es")


def test_mobile_block(client):
    http, _ = client
    payload = http.get("/recommendations/mobile", headers=auth(TARGET)).json()

    assert payload["templates"][0]["id"] == "main"
    assert [c["fullname"] for c in payload["otherdata"]["courses"]] == ["Data Structures", "Statistics"]
    assert payload["otherdata"]["courses"][0]["formatted_summary"] == "Trees and graphs"
    assert "courseClicked" in payload["javascript"]


def test_mobile_block_requires_login(client):
    http, _ = client
    payload = http.get("/recommendations/mobile").json()
    assert payload == {"templates": [{"id": "main", "html": get_string("login_required")}]}


def test_courses_endpoint(client):
    http, _ = client

    assert http.get("/recommendations/courses").status_code == 401

    body = http.get("/recommendations/courses", headers=auth(TARGET)).json()
    assert body["user_id"] == TARGET
    assert body["total_recommended"] == 2
    assert [(c["id"], c["score"]) for c in body["recommendations"]] == [(2, 60), (3, 10)]


def test_mock_data_mode(client, monkeypatch):
    http, _ = client
    monkeypatch.setattr(config, "USE_MOCK_DATA", True)

    body = http.get("/recommendations/courses", headers=auth(TARGET)).json()

    assert body["recommendations"][0]["fullname"] == "Data Structures"
    assert body["recommendations"][0]["score"] == 70


class UnavailableSource(EnrollmentSource):
    """Host database that fails every query."""

    def _fail(self):
        raise OperationalError("SELECT courseid FROM mdl_enrol", {}, Exception("server has gone away"))

    def get_enrolled_course_ids(self, user_id):
        self._fail()

    def get_similar_user_ids(self, course_ids, exclude_user_id):
        self._fail()

    def get_candidate_courses(self, user_ids, exclude_course_ids, limit):
        self._fail()

    def get_category_ids(self, course_ids):
        self._fail()


@pytest.mark.parametrize("path", ["/recommendations/block", "/recommendations/mobile", "/recommendations/courses"])
def test_database_failure_is_an_error_not_an_empty_block(client, path):
    http, _ = client
    app.dependency_overrides[get_source] = lambda: UnavailableSource()

    response = http.get(path, headers=auth(TARGET))

    assert response.status_code == 500
    assert "server has gone away" in response.json()["error"]
    assert get_string("no_recommendations") not in response.text

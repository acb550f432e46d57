"""
Shared fixtures: an in-memory SQLite copy of the host tables and
helpers to seed courses, users and enrolments.
"""

import os

# Must be set before db.py / config.py are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["WWWROOT"] = "https://lms.example.org"
os.environ["DB_TABLE_PREFIX"] = "mdl_"
os.environ["DEFAULT_LANG"] = "en"
os.environ["USE_MOCK_DATA"] = "0"
os.environ["R2_PUBLIC_URL"] = ""
os.environ["R2_ENDPOINT"] = ""

from typing import Iterable, Tuple

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import Base
from models.models import Course, CourseCategory, Enrol, UserEnrolment
from models.models_user import User
from course_recommendation.logic.contracts import Course as CourseModel


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    session = Session()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


def seed_host_data(
    session,
    courses: Iterable[CourseModel],
    enrollments: Iterable[Tuple[int, int]],
    guest_ids: Iterable[int] = ()
):
    """
    Insert categories, courses (one manual enrol instance each), users
    and user enrolments. Users are created for every id in `enrollments`.
    """
    courses = list(courses)
    enrollments = list(enrollments)
    guest_ids = set(guest_ids)

    categories = {}
    for c in courses:
        categories.setdefault(c.category_id, c.category_name)
    for category_id, name in categories.items():
        session.add(CourseCategory(id=category_id, name=name))

    enrol_ids = {}
    for c in courses:
        session.add(Course(
            id=c.id,
            category=c.category_id,
            fullname=c.fullname,
            shortname=f"C{c.id}",
            summary=c.summary,
            visible=1 if c.visible else 0,
        ))
        enrol_ids[c.id] = 1000 + c.id
        session.add(Enrol(id=enrol_ids[c.id], enrol="manual", courseid=c.id))

    user_ids = {u for u, _ in enrollments} | guest_ids
    for user_id in sorted(user_ids):
        username = "guest" if user_id in guest_ids else f"user{user_id}"
        session.add(User(id=user_id, username=username, email=f"{username}@example.org"))

    for user_id, course_id in enrollments:
        session.add(UserEnrolment(enrolid=enrol_ids[course_id], userid=user_id))

    session.commit()


@pytest.fixture
def seed(db_session):
    def _seed(courses, enrollments, guest_ids=()):
        seed_host_data(db_session, courses, enrollments, guest_ids)
        return db_session
    return _seed

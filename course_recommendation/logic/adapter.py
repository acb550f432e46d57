"""
Enrollment Data Adapter

Read-only access to the host platform's enrollment and course data, exposed as
the four queries the co-enrollment scorer needs:

- the courses a user is enrolled in
- the other users enrolled in at least one of a set of courses
- the visible courses a set of users take, with distinct-user counts
- the categories spanned by a set of courses

This is a pure READ layer:
- NO scoring logic
- NO ranking
- NO DB writes
"""

from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Dict, Iterable, List, Set, Tuple, Union

from sqlalchemy import select, func, distinct
from sqlalchemy.orm import Session

from models.models import Course as CourseRow, CourseCategory, Enrol, UserEnrolment
from .contracts import Course, CandidateCourse, Enrollment


class EnrollmentSource(ABC):
    """Query interface the recommendation engine reads through."""

    @abstractmethod
    def get_enrolled_course_ids(self, user_id: int) -> Set[int]:
        """Return the ids of the courses `user_id` is enrolled in."""

    @abstractmethod
    def get_similar_user_ids(self, course_ids: Set[int], exclude_user_id: int) -> Set[int]:
        """Return users other than `exclude_user_id` enrolled in at least one of `course_ids`."""

    @abstractmethod
    def get_candidate_courses(
        self,
        user_ids: Set[int],
        exclude_course_ids: Set[int],
        limit: int
    ) -> List[CandidateCourse]:
        """
        Return visible courses that any of `user_ids` is enrolled in, minus
        `exclude_course_ids`, each with the count of distinct such users.

        Ordered by frequency desc, full name asc, id asc and cut to `limit`.
        """

    @abstractmethod
    def get_category_ids(self, course_ids: Set[int]) -> Set[int]:
        """Return the distinct category ids of `course_ids`."""


# =============================================================================
# SQL (host database)
# =============================================================================

class SqlEnrollmentSource(EnrollmentSource):
    """
    Reads the host's `user_enrolments`, `enrol`, `course` and
    `course_categories` tables through SQLAlchemy.

    Database errors are not caught here; they propagate to the request.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_enrolled_course_ids(self, user_id: int) -> Set[int]:
        stmt = (
            select(distinct(Enrol.courseid))
            .select_from(Enrol)
            .join(UserEnrolment, UserEnrolment.enrolid == Enrol.id)
            .where(UserEnrolment.userid == user_id)
        )
        return set(self.db.execute(stmt).scalars().all())

    def get_similar_user_ids(self, course_ids: Set[int], exclude_user_id: int) -> Set[int]:
        if not course_ids:
            return set()
        stmt = (
            select(distinct(UserEnrolment.userid))
            .select_from(UserEnrolment)
            .join(Enrol, Enrol.id == UserEnrolment.enrolid)
            .where(Enrol.courseid.in_(course_ids))
            .where(UserEnrolment.userid != exclude_user_id)
        )
        return set(self.db.execute(stmt).scalars().all())

    def get_candidate_courses(
        self,
        user_ids: Set[int],
        exclude_course_ids: Set[int],
        limit: int
    ) -> List[CandidateCourse]:
        if not user_ids:
            return []

        stmt = self.candidate_statement(user_ids, exclude_course_ids, limit)
        return [
            CandidateCourse(
                id=row.id,
                fullname=row.fullname or "",
                category_id=row.category,
                category_name=row.category_name or "",
                visible=bool(row.visible),
                summary=row.summary,
                frequency=row.frequency,
            )
            for row in self.db.execute(stmt).all()
        ]

    def candidate_statement(self, user_ids: Set[int], exclude_course_ids: Set[int], limit: int):
        """
        Distinct users are counted per course id in a subquery; course and
        category columns are joined on afterwards so no text column is grouped.
        """
        counts = (
            select(
                Enrol.courseid.label("courseid"),
                func.count(distinct(UserEnrolment.userid)).label("frequency"),
            )
            .select_from(Enrol)
            .join(UserEnrolment, UserEnrolment.enrolid == Enrol.id)
            .where(UserEnrolment.userid.in_(user_ids))
        )
        if exclude_course_ids:
            counts = counts.where(Enrol.courseid.not_in(exclude_course_ids))
        counts = counts.group_by(Enrol.courseid).subquery("course_counts")

        return (
            select(
                CourseRow.id,
                CourseRow.fullname,
                CourseRow.category,
                CourseCategory.name.label("category_name"),
                CourseRow.visible,
                CourseRow.summary,
                counts.c.frequency,
            )
            .select_from(CourseRow)
            .join(counts, counts.c.courseid == CourseRow.id)
            .join(CourseCategory, CourseCategory.id == CourseRow.category)
            .where(CourseRow.visible == 1)
            .order_by(counts.c.frequency.desc(), CourseRow.fullname.asc(), CourseRow.id.asc())
            .limit(limit)
        )

    def get_category_ids(self, course_ids: Set[int]) -> Set[int]:
        if not course_ids:
            return set()
        stmt = (
            select(distinct(CourseCategory.id))
            .select_from(CourseCategory)
            .join(CourseRow, CourseRow.category == CourseCategory.id)
            .where(CourseRow.id.in_(course_ids))
        )
        return set(self.db.execute(stmt).scalars().all())


# =============================================================================
# IN-MEMORY (tests, demo mode)
# =============================================================================

class InMemoryEnrollmentSource(EnrollmentSource):
    """
    Same four queries answered from plain Python collections.

    Args:
        courses: Known courses
        enrollments: Enrollment models or (user_id, course_id) pairs
    """

    def __init__(
        self,
        courses: Iterable[Course],
        enrollments: Iterable[Union[Enrollment, Tuple[int, int]]]
    ):
        self.courses: Dict[int, Course] = {c.id: c for c in courses}
        self.course_users: Dict[int, Set[int]] = defaultdict(set)
        self.user_courses: Dict[int, Set[int]] = defaultdict(set)

        for enrollment in enrollments:
            if isinstance(enrollment, Enrollment):
                user_id, course_id = enrollment.user_id, enrollment.course_id
            else:
                user_id, course_id = enrollment
            self.course_users[course_id].add(user_id)
            self.user_courses[user_id].add(course_id)

    def get_enrolled_course_ids(self, user_id: int) -> Set[int]:
        return set(self.user_courses.get(user_id, set()))

    def get_similar_user_ids(self, course_ids: Set[int], exclude_user_id: int) -> Set[int]:
        users: Set[int] = set()
        for course_id in course_ids:
            users |= self.course_users.get(course_id, set())
        users.discard(exclude_user_id)
        return users

    def get_candidate_courses(
        self,
        user_ids: Set[int],
        exclude_course_ids: Set[int],
        limit: int
    ) -> List[CandidateCourse]:
        candidates: List[CandidateCourse] = []

        for course_id, enrolled in self.course_users.items():
            course = self.courses.get(course_id)
            if course is None or not course.visible or course_id in exclude_course_ids:
                continue
            frequency = len(enrolled & user_ids)
            if frequency == 0:
                continue
            candidates.append(CandidateCourse(**course.model_dump(), frequency=frequency))

        candidates.sort(key=lambda c: (-c.frequency, c.fullname, c.id))
        return candidates[:limit]

    def get_category_ids(self, course_ids: Set[int]) -> Set[int]:
        return {
            self.courses[course_id].category_id
            for course_id in course_ids
            if course_id in self.courses
        }


def build_sample_source() -> InMemoryEnrollmentSource:
    """
    Small fixed dataset for running the service without a host database.
    User 1 takes Python Basics; users 2-5 take it too, plus a mix of other courses.
    """
    courses = [
        Course(id=10, fullname="Python Basics", category_id=1, category_name="Programming",
               summary="<p>Variables, loops and functions.</p>"),
        Course(id=11, fullname="Data Structures", category_id=1, category_name="Programming",
               summary="<p>Lists, trees, graphs and hash tables.</p>"),
        Course(id=12, fullname="Web Development", category_id=1, category_name="Programming",
               summary="<p>HTTP, HTML and building APIs.</p>"),
        Course(id=20, fullname="Statistics 101", category_id=2, category_name="Mathematics",
               summary="<p>Descriptive statistics and probability.</p>"),
        Course(id=21, fullname="Linear Algebra", category_id=2, category_name="Mathematics",
               summary="<p>Vectors, matrices and linear maps.</p>"),
        Course(id=30, fullname="Academic Writing", category_id=3, category_name="Humanities",
               summary="<p>Structuring essays and citing sources.</p>"),
        Course(id=31, fullname="Draft: Ethics in AI", category_id=3, category_name="Humanities",
               visible=False, summary="<p>Not yet published.</p>"),
    ]
    enrollments = [
        (1, 10),
        (2, 10), (2, 11), (2, 20),
        (3, 10), (3, 11), (3, 21), (3, 31),
        (4, 10), (4, 12), (4, 20), (4, 31),
        (5, 10), (5, 30), (5, 20),
    ]
    return InMemoryEnrollmentSource(courses, enrollments)

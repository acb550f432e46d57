# Read-only mappings of the host LMS course and enrolment tables.
# The host owns the schema; create_all is only used for local/dev databases and tests.

from sqlalchemy import Column, Integer, BigInteger, String, Text, ForeignKey, SmallInteger
from sqlalchemy.orm import relationship

from db import Base
from course_recommendation.config import DB_TABLE_PREFIX


def _table(name: str) -> str:
    return f"{DB_TABLE_PREFIX}{name}"


class CourseCategory(Base):
    __tablename__ = _table("course_categories")
    __table_args__ = {'extend_existing': True}

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    name = Column(String(255), nullable=False, default="")
    parent = Column(BigInteger, nullable=False, default=0)
    visible = Column(SmallInteger, nullable=False, default=1)

    courses = relationship("Course", back_populates="category_ref")


class Course(Base):
    __tablename__ = _table("course")
    __table_args__ = {'extend_existing': True}

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    category = Column(BigInteger, ForeignKey(f"{_table('course_categories')}.id"), nullable=False, default=0)
    fullname = Column(String(254), nullable=False, default="")
    shortname = Column(String(255), nullable=False, default="")
    summary = Column(Text)
    visible = Column(SmallInteger, nullable=False, default=1)

    category_ref = relationship("CourseCategory", back_populates="courses")
    enrol_instances = relationship("Enrol", back_populates="course")
    overview_files = relationship("CourseOverviewFile", back_populates="course")


class Enrol(Base):
    """An enrolment method instance attached to a course (manual, self, cohort...)."""
    __tablename__ = _table("enrol")
    __table_args__ = {'extend_existing': True}

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    enrol = Column(String(20), nullable=False, default="manual")
    status = Column(BigInteger, nullable=False, default=0)
    courseid = Column(BigInteger, ForeignKey(f"{_table('course')}.id"), nullable=False)

    course = relationship("Course", back_populates="enrol_instances")
    user_enrolments = relationship("UserEnrolment", back_populates="enrol_instance")


class UserEnrolment(Base):
    __tablename__ = _table("user_enrolments")
    __table_args__ = {'extend_existing': True}

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    status = Column(BigInteger, nullable=False, default=0)
    enrolid = Column(BigInteger, ForeignKey(f"{_table('enrol')}.id"), nullable=False)
    userid = Column(BigInteger, ForeignKey(f"{_table('user')}.id"), nullable=False)

    enrol_instance = relationship("Enrol", back_populates="user_enrolments")


class CourseOverviewFile(Base):
    """
    Files attached to a course's overview area. `storage_key` is the object key
    in the host's file storage bucket; directory entries use filename ".".
    """
    __tablename__ = _table("course_overview_files")
    __table_args__ = {'extend_existing': True}

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    courseid = Column(BigInteger, ForeignKey(f"{_table('course')}.id"), nullable=False)
    filepath = Column(String(255), nullable=False, default="/")
    filename = Column(String(255), nullable=False, default=".")
    mimetype = Column(String(100))
    storage_key = Column(String(255))
    sortorder = Column(BigInteger, nullable=False, default=0)

    course = relationship("Course", back_populates="overview_files")

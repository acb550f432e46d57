"""
Recommendation Logic Module

Provides the co-enrollment scoring engine for course recommendations.
"""

from .contracts import (
    Course,
    Enrollment,
    CandidateCourse,
    ScoredCourse,
    BlockContent,
    RecommendationOutput,
)
from .adapter import EnrollmentSource, SqlEnrollmentSource, InMemoryEnrollmentSource
from .engine import RecommendationEngine, recommend

__all__ = [
    # Main engine
    "RecommendationEngine",
    "recommend",

    # Data sources
    "EnrollmentSource",
    "SqlEnrollmentSource",
    "InMemoryEnrollmentSource",

    # Contracts
    "Course",
    "Enrollment",
    "CandidateCourse",
    "ScoredCourse",
    "BlockContent",
    "RecommendationOutput",
]

"""
Data Contracts for the Course Recommendation Engine

Pydantic models passed between the data-source adapter, the scorer and the
presentation layer. All of them are read-only projections of host data or
transient per-request values; nothing here is persisted.
"""

from typing import List, Optional
from pydantic import BaseModel, Field


# =============================================================================
# HOST DATA PROJECTIONS
# =============================================================================

class Course(BaseModel):
    """A course as read from the host platform."""
    id: int
    fullname: str
    category_id: int
    category_name: str = ""
    visible: bool = True
    summary: Optional[str] = None

    class Config:
        from_attributes = True


class Enrollment(BaseModel):
    """A (user, course) enrollment pair."""
    user_id: int
    course_id: int


# =============================================================================
# PIPELINE STRUCTURES
# =============================================================================

class CandidateCourse(Course):
    """
    A course that similar users take and the target user does not.
    `frequency` is the number of distinct similar users enrolled in it.
    """
    frequency: int = Field(ge=0)


class ScoredCourse(CandidateCourse):
    """
    A candidate course with its recommendation score.
    Transient: computed per request and discarded afterwards.
    """
    score: int = Field(ge=0)
    formatted_summary: Optional[str] = None


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class BlockContent(BaseModel):
    """Desktop block content: title, body text (HTML) and footer."""
    title: str = ""
    text: str = ""
    footer: str = ""


class RecommendationOutput(BaseModel):
    """Raw recommendation list for API consumers."""
    user_id: int
    recommendations: List[ScoredCourse] = Field(default_factory=list)
    total_recommended: int = 0
    engine_version: str = "1.0.0"

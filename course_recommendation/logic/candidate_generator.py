"""
Candidate Generator

Finds the courses worth scoring for a user from co-enrollment:
the user's own courses, the users who share at least one of them,
and the visible courses those users take that the user does not.
"""

import logging
from typing import List, NamedTuple, Set

from .adapter import EnrollmentSource
from .contracts import CandidateCourse
from .constants import CANDIDATE_POOL_LIMIT

logger = logging.getLogger(__name__)


class CandidatePool(NamedTuple):
    enrolled_course_ids: Set[int]
    similar_user_ids: Set[int]
    candidates: List[CandidateCourse]


def generate_candidates(
    source: EnrollmentSource,
    user_id: int,
    pool_limit: int = CANDIDATE_POOL_LIMIT
) -> CandidatePool:
    """
    Build the candidate pool for `user_id`.

    Stops early (with an empty candidate list) when the user has no
    enrollments or nobody shares a course with them.

    Args:
        source: Enrollment data source
        user_id: Target user
        pool_limit: Candidates kept by frequency before scoring

    Returns:
        CandidatePool with the enrolled course ids, similar users and candidates
    """
    enrolled = source.get_enrolled_course_ids(user_id)
    if not enrolled:
        logger.debug(f"User {user_id} has no enrollments")
        return CandidatePool(set(), set(), [])

    similar_users = source.get_similar_user_ids(enrolled, exclude_user_id=user_id)
    if not similar_users:
        logger.debug(f"No co-enrolled users for user {user_id}")
        return CandidatePool(enrolled, set(), [])

    candidates = source.get_candidate_courses(similar_users, enrolled, limit=pool_limit)

    # The data source already filters these; keep the invariant local to the engine too
    candidates = [c for c in candidates if c.visible and c.id not in enrolled]

    return CandidatePool(enrolled, similar_users, candidates)

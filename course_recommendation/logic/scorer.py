"""
Course Scorer

score = frequency * FREQUENCY_WEIGHT, plus CATEGORY_BOOST when the course
sits in a category the user already studies in.
"""

from typing import List, Set

from .contracts import CandidateCourse, ScoredCourse
from .constants import FREQUENCY_WEIGHT, CATEGORY_BOOST


def score_course(candidate: CandidateCourse, user_category_ids: Set[int]) -> ScoredCourse:
    score = candidate.frequency * FREQUENCY_WEIGHT
    if candidate.category_id in user_category_ids:
        score += CATEGORY_BOOST
    return ScoredCourse(**candidate.model_dump(), score=score)


def score_candidates(
    candidates: List[CandidateCourse],
    user_category_ids: Set[int]
) -> List[ScoredCourse]:
    """
    Score every candidate against the user's categories.

    Args:
        candidates: Candidate courses with frequencies
        user_category_ids: Categories spanned by the user's enrolled courses

    Returns:
        ScoredCourse list, in input order
    """
    return [score_course(c, user_category_ids) for c in candidates]

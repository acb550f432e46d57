"""
Recommendation Engine

Main orchestrator for co-enrollment course recommendations.
This is the primary entry point shared by the desktop and mobile callers.
"""

import logging
from typing import List

from .adapter import EnrollmentSource
from .contracts import ScoredCourse, RecommendationOutput
from .candidate_generator import generate_candidates
from .scorer import score_candidates
from .ranker import rank_courses, select_top
from .constants import CANDIDATE_POOL_LIMIT, MAX_RECOMMENDATIONS, ENGINE_VERSION

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """
    Recommends courses to a user from what co-enrolled users take.

    Pipeline flow:
    1. Candidate Generation - enrolled courses, similar users, candidate courses
    2. Scoring - frequency weight plus same-category boost
    3. Ranking - score desc, name asc, top N

    The engine holds no per-user state; one instance can serve any number
    of users as long as its data source is usable from the caller's thread.
    """

    def __init__(
        self,
        source: EnrollmentSource,
        pool_limit: int = CANDIDATE_POOL_LIMIT,
        max_results: int = MAX_RECOMMENDATIONS
    ):
        """
        Args:
            source: Read access to enrollments and courses
            pool_limit: Candidates kept by frequency before scoring
            max_results: Maximum courses returned
        """
        self.source = source
        self.pool_limit = pool_limit
        self.max_results = max_results
        self.version = ENGINE_VERSION

    def recommend(self, user_id: int) -> List[ScoredCourse]:
        """
        Recommend up to `max_results` courses for a user.

        An empty list means there was nothing to recommend from (no
        enrollments, no co-enrolled users, or no other visible courses).

        Args:
            user_id: Target user

        Returns:
            Ranked ScoredCourse list
        """
        logger.info(f"Computing course recommendations for user {user_id}")

        # Step 1: Candidates
        pool = generate_candidates(self.source, user_id, pool_limit=self.pool_limit)
        if not pool.candidates:
            logger.debug(f"No candidate courses for user {user_id}")
            return []

        # Step 2: Score
        user_categories = self.source.get_category_ids(pool.enrolled_course_ids)
        scored = score_candidates(pool.candidates, user_categories)

        # Step 3: Rank
        top = select_top(rank_courses(scored), max_total=self.max_results)

        logger.info(
            f"Recommended {len(top)} courses for user {user_id} "
            f"({len(pool.similar_user_ids)} similar users, {len(pool.candidates)} candidates)"
        )
        return top

    def recommend_output(self, user_id: int) -> RecommendationOutput:
        recommendations = self.recommend(user_id)
        return RecommendationOutput(
            user_id=user_id,
            recommendations=recommendations,
            total_recommended=len(recommendations),
            engine_version=self.version,
        )


# Convenience function for simple usage
def recommend(source: EnrollmentSource, user_id: int) -> List[ScoredCourse]:
    """
    Recommend courses for `user_id` using `source`.

    Args:
        source: Enrollment data source
        user_id: Target user

    Returns:
        Up to six ScoredCourse values, best first
    """
    return RecommendationEngine(source).recommend(user_id)

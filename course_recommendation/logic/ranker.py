"""
Ranker

Orders scored courses and keeps the top N.
"""

from typing import List
from .contracts import ScoredCourse
from .constants import MAX_RECOMMENDATIONS


def rank_courses(scored: List[ScoredCourse]) -> List[ScoredCourse]:
    """
    Rank by score (descending), then course name (ascending).
    Course id breaks any remaining tie so the order is fully deterministic.
    """
    return sorted(scored, key=lambda c: (-c.score, c.fullname, c.id))


def select_top(
    ranked: List[ScoredCourse],
    max_total: int = MAX_RECOMMENDATIONS
) -> List[ScoredCourse]:
    return ranked[:max_total]

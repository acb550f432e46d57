"""
Recommendation Constants

Weights, limits and display lengths used by the co-enrollment scorer
and its presentation adapters. All values are deterministic.
"""

# =============================================================================
# SCORING WEIGHTS
# =============================================================================

# Points per distinct similar user enrolled in a candidate course
FREQUENCY_WEIGHT = 10

# Flat boost when the candidate shares a category with one of the user's courses
CATEGORY_BOOST = 50

# =============================================================================
# SELECTION LIMITS
# =============================================================================

# Candidates kept (by frequency desc, name asc) before the category boost is applied.
# A low-frequency course can be cut here even if its boost would rank it highly.
CANDIDATE_POOL_LIMIT = 20

# Maximum number of courses returned to the caller
MAX_RECOMMENDATIONS = 6

# =============================================================================
# PRESENTATION
# =============================================================================

# Mobile summaries longer than this are truncated
SUMMARY_MAX_LENGTH = 200
SUMMARY_ELLIPSIS = "..."
SUMMARY_TRUNCATE_AT = SUMMARY_MAX_LENGTH - len(SUMMARY_ELLIPSIS)  # 197

ENGINE_VERSION = "1.0.0"

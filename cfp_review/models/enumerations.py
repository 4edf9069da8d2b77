from enum import Enum

class ShortlistStatus(str, Enum):
    LIKELY_SHORTLISTED = "likely_shortlisted"  # Strong score with enough coverage
    NEEDS_MORE_REVIEWS = "needs_more_reviews"  # Not enough data to decide
    LIKELY_REJECT = "likely_reject"            # Low score with enough reviews
    BORDERLINE = "borderline"                  # Everything else

class ScoreTier(str, Enum):
    NONE = "none"
    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"
    POOR = "poor"

class SortOption(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    MOST_REVIEWS = "most_reviews"
    LEAST_REVIEWS = "least_reviews"
    HIGHEST_SCORE = "highest_score"
    LOWEST_SCORE = "lowest_score"
    HIGHEST_COVERAGE = "highest_coverage"
    LOWEST_COVERAGE = "lowest_coverage"
    LAST_REVIEWED = "last_reviewed"
    TITLE = "title"

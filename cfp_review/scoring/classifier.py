"""
scoring/classifier.py — Shortlist Classification

Maps aggregate review facts to one ShortlistStatus.

Rules (first match wins, ranges overlap):
    1. needs_more_reviews  reviewCount < 2
                           OR (reviewCount < 4 AND coverage < 0.5)
                           OR avgScore is None
    2. likely_shortlisted  avgScore >= 3.0 AND reviewCount >= 2
                           AND (coverage >= 0.5 OR reviewCount >= 4)
    3. likely_reject       avgScore < 2.0 AND reviewCount >= 2
    4. borderline          everything else
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from cfp_review.models.enumerations import ScoreTier, ShortlistStatus

SHORTLIST_STATUS_LABELS: Mapping[ShortlistStatus, str] = MappingProxyType({
    ShortlistStatus.LIKELY_SHORTLISTED: "Likely Shortlisted",
    ShortlistStatus.NEEDS_MORE_REVIEWS: "Needs More Reviews",
    ShortlistStatus.LIKELY_REJECT: "Likely Reject",
    ShortlistStatus.BORDERLINE: "Borderline",
})

# Dashboard tone per status
SHORTLIST_STATUS_TONES: Mapping[ShortlistStatus, str] = MappingProxyType({
    ShortlistStatus.LIKELY_SHORTLISTED: "green",
    ShortlistStatus.BORDERLINE: "yellow",
    ShortlistStatus.NEEDS_MORE_REVIEWS: "orange",
    ShortlistStatus.LIKELY_REJECT: "red",
})


@dataclass(frozen=True)
class ClassificationInput:
    """Aggregate facts the classifier decides on."""
    avg_score: Optional[float]
    review_count: int
    coverage_ratio: float


class ShortlistClassifier:
    """Classify a submission from its aggregate review data."""

    MIN_REVIEWS: int = 2
    CONFIDENT_REVIEWS: int = 4
    MIN_COVERAGE: float = 0.5
    SHORTLIST_SCORE: float = 3.0
    REJECT_SCORE: float = 2.0

    def classify(self, data: ClassificationInput) -> ShortlistStatus:
        avg_score = data.avg_score
        review_count = data.review_count
        coverage_ratio = data.coverage_ratio

        # Data-sufficiency gate takes priority over any score
        if review_count < self.MIN_REVIEWS or (
            review_count < self.CONFIDENT_REVIEWS and coverage_ratio < self.MIN_COVERAGE
        ):
            return ShortlistStatus.NEEDS_MORE_REVIEWS

        if avg_score is None:
            return ShortlistStatus.NEEDS_MORE_REVIEWS

        if (
            avg_score >= self.SHORTLIST_SCORE
            and review_count >= self.MIN_REVIEWS
            and (coverage_ratio >= self.MIN_COVERAGE or review_count >= self.CONFIDENT_REVIEWS)
        ):
            return ShortlistStatus.LIKELY_SHORTLISTED

        if avg_score < self.REJECT_SCORE and review_count >= self.MIN_REVIEWS:
            return ShortlistStatus.LIKELY_REJECT

        return ShortlistStatus.BORDERLINE


def status_label(status: ShortlistStatus) -> str:
    return SHORTLIST_STATUS_LABELS[status]


def score_tier(score: Optional[float]) -> ScoreTier:
    """Coarse quality tier used for colour-coding a single average score."""
    if score is None:
        return ScoreTier.NONE
    if score >= 3.5:
        return ScoreTier.STRONG
    if score >= 2.5:
        return ScoreTier.MODERATE
    if score >= 1.5:
        return ScoreTier.WEAK
    return ScoreTier.POOR

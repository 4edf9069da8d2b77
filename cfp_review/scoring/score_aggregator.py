# cfp_review/scoring/score_aggregator.py
"""
Score Aggregator
----------------
Reduces the reviews of one submission to its SubmissionScoring.

Formula:
    avg_score      = mean(score_overall for reviews with a score)   or None
    coverage_ratio = review_count / total_reviewers   (0 when total_reviewers <= 0)
    coverage_pct   = coverage_ratio × 100

Null-score reviews count toward review_count and last_reviewed_at but not
toward the average. Inputs are not range-checked here; that happens where
reviews are written.
"""
import structlog
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Sequence

from cfp_review.models.enumerations import ShortlistStatus
from cfp_review.scoring.classifier import ClassificationInput, ShortlistClassifier

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Review:
    """One reviewer's review of a submission, as read from storage."""
    score_overall: Optional[float]
    created_at: datetime
    reviewer_id: Optional[str] = None
    submission_id: Optional[str] = None


@dataclass(frozen=True)
class SubmissionScoring:
    """Output of ScoreAggregator.compute(). Never persisted."""
    review_count: int
    avg_score: Optional[float]            # None iff no review carries a score
    total_reviewers: int
    coverage_ratio: float                 # in [0, 1] for valid input
    coverage_percent: float               # coverage_ratio × 100
    last_reviewed_at: Optional[datetime]
    status: ShortlistStatus


def as_utc_timestamp(value: datetime) -> float:
    # Naive datetimes are treated as UTC so mixed inputs stay comparable
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


class ScoreAggregator:
    """Compute aggregate scoring facts for one submission."""

    def __init__(self, classifier: Optional[ShortlistClassifier] = None):
        self.classifier = classifier or ShortlistClassifier()

    def compute(
        self,
        reviews: Sequence[Review],
        total_reviewers: int,
    ) -> SubmissionScoring:
        """
        Args:
            reviews: Every review recorded for the submission, scored or not.
            total_reviewers: Reviewers eligible to review the submission.
                             May be 0, in which case coverage is 0.

        Returns:
            SubmissionScoring with status populated by the classifier.

        Examples:
            >>> agg = ScoreAggregator()
            >>> result = agg.compute([], 5)
            >>> result.status
            <ShortlistStatus.NEEDS_MORE_REVIEWS: 'needs_more_reviews'>
        """
        review_count = len(reviews)

        scores = [r.score_overall for r in reviews if r.score_overall is not None]
        avg_score = sum(scores) / len(scores) if scores else None

        coverage_ratio = review_count / total_reviewers if total_reviewers > 0 else 0.0
        coverage_percent = coverage_ratio * 100

        last_reviewed_at = None
        if reviews:
            last_reviewed_at = max(reviews, key=lambda r: as_utc_timestamp(r.created_at)).created_at

        status = self.classifier.classify(
            ClassificationInput(
                avg_score=avg_score,
                review_count=review_count,
                coverage_ratio=coverage_ratio,
            )
        )

        logger.debug(
            "submission_scored",
            review_count=review_count,
            scored_reviews=len(scores),
            avg_score=avg_score,
            total_reviewers=total_reviewers,
            coverage_ratio=coverage_ratio,
            status=status.value,
        )

        return SubmissionScoring(
            review_count=review_count,
            avg_score=avg_score,
            total_reviewers=total_reviewers,
            coverage_ratio=coverage_ratio,
            coverage_percent=coverage_percent,
            last_reviewed_at=last_reviewed_at,
            status=status,
        )

"""
Scoring Service — CFP Review Pipeline Orchestrator
cfp_review/services/scoring_service.py

Runs the scoring core over submissions handed in by the API layer:

  1. ScoreAggregator → SubmissionScoring per submission (recomputed every call)
  2. InsightsAggregator → status / score bucket / coverage bucket tallies
  3. Ranking → filter, sort and paginate scored submissions

Nothing is cached; freshness is whatever the caller's review rows are.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple, Union

from cfp_review.config import settings
from cfp_review.core.exceptions import InsightsBatchTooLargeException
from cfp_review.models.enumerations import SortOption
from cfp_review.scoring.insights import CfpInsights, InsightsAggregator
from cfp_review.scoring.score_aggregator import Review, ScoreAggregator, SubmissionScoring
from cfp_review.services.submission_ranking import (
    Page,
    ScoredSubmission,
    SubmissionFilter,
    filter_submissions,
    paginate,
    sort_submissions,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmissionReviews:
    """All reviews of one submission plus its eligible reviewer count."""
    submission_id: str
    reviews: Sequence[Review]
    total_reviewers: int
    title: str = ""
    submission_type: Optional[str] = None
    created_at: Optional[datetime] = None
    abstract: str = ""
    speaker: Optional[str] = None
    tags: Tuple[str, ...] = ()


class ScoringService:
    """Score, summarize and rank CFP submissions."""

    def __init__(
        self,
        aggregator: Optional[ScoreAggregator] = None,
        insights: Optional[InsightsAggregator] = None,
        max_batch: Optional[int] = None,
    ):
        self.aggregator = aggregator or ScoreAggregator()
        self.insights = insights or InsightsAggregator()
        self.max_batch = max_batch or settings.INSIGHTS_MAX_SUBMISSIONS

    def _check_batch(self, size: int) -> None:
        if size > self.max_batch:
            logger.warning(f"Rejected batch of {size} submissions (limit {self.max_batch})")
            raise InsightsBatchTooLargeException(size, self.max_batch)

    def score(self, reviews: Sequence[Review], total_reviewers: int) -> SubmissionScoring:
        return self.aggregator.compute(reviews, total_reviewers)

    def score_all(self, submissions: Sequence[SubmissionReviews]) -> List[SubmissionScoring]:
        self._check_batch(len(submissions))
        return [self.score(s.reviews, s.total_reviewers) for s in submissions]

    def summarize(self, submissions: Sequence[SubmissionReviews]) -> CfpInsights:
        """Score every submission and tally the committee insights."""
        scorings = self.score_all(submissions)
        insights = self.insights.summarize(scorings)
        logger.info(f"Summarized {insights.total} submissions")
        return insights

    def rank(
        self,
        submissions: Sequence[SubmissionReviews],
        filters: Optional[SubmissionFilter] = None,
        sort_by: Union[SortOption, str] = SortOption.NEWEST,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> Page:
        """Score, filter, sort and paginate submissions for the list view."""
        scorings = self.score_all(submissions)
        scored = [
            ScoredSubmission(
                submission_id=s.submission_id,
                title=s.title,
                submission_type=s.submission_type,
                created_at=s.created_at,
                scoring=scoring,
                abstract=s.abstract,
                speaker=s.speaker,
                tags=tuple(s.tags),
            )
            for s, scoring in zip(submissions, scorings)
        ]
        filtered = filter_submissions(scored, filters or SubmissionFilter())
        ordered = sort_submissions(filtered, sort_by)
        return paginate(ordered, page, page_size or settings.SUBMISSIONS_PAGE_SIZE)


@lru_cache()
def get_scoring_service() -> ScoringService:
    """Get cached ScoringService instance."""
    return ScoringService()

"""
scoring/insights.py — Program Committee Insights

Tallies a submission set by shortlist status, score bucket and coverage
bucket. Every status and bucket key is present in the output, even at 0,
and sum(by_status.values()) == len(submissions).
"""

import structlog
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from cfp_review.models.enumerations import ShortlistStatus
from cfp_review.scoring.buckets import (
    COVERAGE_BUCKET_KEYS,
    SCORE_BUCKET_KEYS,
    BucketIndexer,
)
from cfp_review.scoring.score_aggregator import SubmissionScoring

logger = structlog.get_logger(__name__)


@dataclass
class CfpInsights:
    """Output of InsightsAggregator.summarize()."""
    by_status: Dict[ShortlistStatus, int]
    by_score_bucket: Dict[str, int]
    by_coverage_bucket: Dict[str, int]

    @property
    def total(self) -> int:
        return sum(self.by_status.values())


class InsightsAggregator:
    """Summarize scored submissions for the committee dashboard."""

    def __init__(self, indexer: Optional[BucketIndexer] = None):
        self.indexer = indexer or BucketIndexer()

    def summarize(self, submissions: Iterable[SubmissionScoring]) -> CfpInsights:
        by_status = {status: 0 for status in ShortlistStatus}
        by_score_bucket = {key: 0 for key in SCORE_BUCKET_KEYS}
        by_coverage_bucket = {key: 0 for key in COVERAGE_BUCKET_KEYS}

        for scoring in submissions:
            by_status[scoring.status] += 1

            score_key = self.indexer.score_bucket(scoring.avg_score)
            if score_key is not None:
                by_score_bucket[score_key] += 1

            by_coverage_bucket[self.indexer.coverage_bucket(scoring.coverage_percent)] += 1

        insights = CfpInsights(
            by_status=by_status,
            by_score_bucket=by_score_bucket,
            by_coverage_bucket=by_coverage_bucket,
        )

        logger.info(
            "insights_summarized",
            total=insights.total,
            by_status={s.value: n for s, n in by_status.items()},
            unbucketed_scores=insights.total - sum(by_score_bucket.values()),
        )

        return insights

"""
scoring/ — CFP Review Scoring Engine

Modules:
    utils.py             - Half-up rounding and display formatting
    classifier.py        - Shortlist status classification, labels, tones
    score_aggregator.py  - Reviews → SubmissionScoring
    buckets.py           - Score / coverage bucket tables and indexer
    insights.py          - Per-category tallies for the committee dashboard
"""

from cfp_review.scoring.buckets import BucketIndexer
from cfp_review.scoring.classifier import ClassificationInput, ShortlistClassifier
from cfp_review.scoring.insights import CfpInsights, InsightsAggregator
from cfp_review.scoring.score_aggregator import Review, ScoreAggregator, SubmissionScoring
from cfp_review.scoring.utils import format_percent, format_score, round_to

__all__ = [
    "BucketIndexer",
    "CfpInsights",
    "ClassificationInput",
    "InsightsAggregator",
    "Review",
    "ScoreAggregator",
    "ShortlistClassifier",
    "SubmissionScoring",
    "format_percent",
    "format_score",
    "round_to",
]

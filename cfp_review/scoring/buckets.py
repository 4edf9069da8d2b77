"""
scoring/buckets.py — Score and Coverage Buckets

Fixed discrete ranges used to group submissions for distribution reporting.

    Score buckets (inclusive):    0-1.99 | 2-2.99 | 3-3.49 | 3.5-4
    Coverage buckets (percent):   0-24   | 25-49  | 50-74  | 75-100
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Bucket:
    key: str
    label: str
    min: float
    max: float


SCORE_BUCKETS: Tuple[Bucket, ...] = (
    Bucket("0-1.99", "0 - 1.99", 0, 1.99),
    Bucket("2-2.99", "2 - 2.99", 2, 2.99),
    Bucket("3-3.49", "3 - 3.49", 3, 3.49),
    Bucket("3.5-4", "3.5 - 4.0", 3.5, 4),
)

COVERAGE_BUCKETS: Tuple[Bucket, ...] = (
    Bucket("0-24", "0% - 24%", 0, 24),
    Bucket("25-49", "25% - 49%", 25, 49),
    Bucket("50-74", "50% - 74%", 50, 74),
    Bucket("75-100", "75% - 100%", 75, 100),
)

SCORE_BUCKET_KEYS: Tuple[str, ...] = tuple(b.key for b in SCORE_BUCKETS)
COVERAGE_BUCKET_KEYS: Tuple[str, ...] = tuple(b.key for b in COVERAGE_BUCKETS)


class BucketIndexer:
    """Map a score or coverage percentage onto its bucket key."""

    def score_bucket(self, score: Optional[float]) -> Optional[str]:
        """
        First ascending bucket whose inclusive range holds the score.

        Returns None for a missing score, and for values no bucket covers
        (above 4, or inside the 0.01 gaps such as 1.995).
        """
        if score is None:
            return None
        for bucket in SCORE_BUCKETS:
            if bucket.min <= score <= bucket.max:
                return bucket.key
        return None

    def coverage_bucket(self, percent: float) -> str:
        """
        First ascending bucket whose inclusive range holds the percentage.

        Never fails: anything no bucket covers falls through to 75-100.
        That includes values above 100, negatives, and fractional values
        between buckets such as 74.07.
        """
        for bucket in COVERAGE_BUCKETS:
            if bucket.min <= percent <= bucket.max:
                return bucket.key
        return COVERAGE_BUCKETS[-1].key

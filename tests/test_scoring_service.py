# tests/test_scoring_service.py

"""
Scoring Service Tests - batch scoring, insights and ranking orchestration
"""

import pytest
from dataclasses import replace
from datetime import datetime, timezone

from cfp_review.core.exceptions import InsightsBatchTooLargeException
from cfp_review.models.enumerations import ShortlistStatus, SortOption
from cfp_review.services.scoring_service import ScoringService, SubmissionReviews
from cfp_review.services.submission_ranking import SubmissionFilter


@pytest.fixture
def batch(make_review):
    return [
        SubmissionReviews(
            submission_id="s1",
            reviews=[make_review(4, 1), make_review(4, 2)],
            total_reviewers=4,
            title="B talk",
            created_at=datetime(2024, 3, 1, tzinfo=timezone.utc),
        ),
        SubmissionReviews(
            submission_id="s2",
            reviews=[make_review(1, 1), make_review(1, 2)],
            total_reviewers=4,
            title="A talk",
            created_at=datetime(2024, 3, 2, tzinfo=timezone.utc),
        ),
        SubmissionReviews(
            submission_id="s3",
            reviews=[],
            total_reviewers=4,
            title="C talk",
        ),
    ]


class TestScoringService:

    def test_score_all(self, batch):
        scorings = ScoringService().score_all(batch)
        assert [s.status for s in scorings] == [
            ShortlistStatus.LIKELY_SHORTLISTED,
            ShortlistStatus.LIKELY_REJECT,
            ShortlistStatus.NEEDS_MORE_REVIEWS,
        ]

    def test_summarize(self, batch):
        insights = ScoringService().summarize(batch)
        assert insights.total == 3
        assert insights.by_status[ShortlistStatus.BORDERLINE] == 0

    def test_batch_limit(self, batch):
        service = ScoringService(max_batch=2)
        with pytest.raises(InsightsBatchTooLargeException) as exc_info:
            service.summarize(batch)
        assert exc_info.value.size == 3
        assert exc_info.value.limit == 2

    def test_rank_by_title(self, batch):
        page = ScoringService().rank(batch, sort_by=SortOption.TITLE, page_size=2)
        assert [s.submission_id for s in page.items] == ["s2", "s1"]
        assert page.total_pages == 2

    def test_rank_missing_created_at_sorts_last_for_newest(self, batch):
        page = ScoringService().rank(batch, sort_by=SortOption.NEWEST, page_size=10)
        assert [s.submission_id for s in page.items] == ["s2", "s1", "s3"]
        assert page.items[2].created_at is None

    def test_rank_missing_created_at_sorts_first_for_oldest(self, batch):
        page = ScoringService().rank(batch, sort_by=SortOption.OLDEST, page_size=10)
        assert [s.submission_id for s in page.items] == ["s3", "s1", "s2"]

    def test_rank_search(self, batch):
        batch[2] = replace(batch[2], abstract="Intro to type checkers", tags=("python",))
        page = ScoringService().rank(
            batch, filters=SubmissionFilter(search="Python -rust"), page_size=10
        )
        assert [s.submission_id for s in page.items] == ["s3"]
        assert page.items[0].tags == ("python",)

    def test_rank_shortlist_only(self, batch):
        page = ScoringService().rank(
            batch, filters=SubmissionFilter(shortlist_only=True), page_size=10
        )
        assert [s.submission_id for s in page.items] == ["s1"]

    def test_recomputes_every_call(self, make_review):
        service = ScoringService()
        reviews = [make_review(4, 1)]
        first = service.score(reviews, 2)
        reviews.append(make_review(4, 2))
        second = service.score(reviews, 2)
        assert first.status == ShortlistStatus.NEEDS_MORE_REVIEWS
        assert second.status == ShortlistStatus.LIKELY_SHORTLISTED

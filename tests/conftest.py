# tests/conftest.py

"""
Pytest Fixtures - Shared test configurations and review data
"""

import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient

from cfp_review.main import app
from cfp_review.scoring.score_aggregator import Review


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# REVIEW FIXTURES
# =============================================================================

def _review(score, day: int = 1, hour: int = 10) -> Review:
    """Review recorded on 2024-01-<day>."""
    return Review(
        score_overall=score,
        created_at=datetime(2024, 1, day, hour, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def make_review():
    """Factory for reviews on a given January 2024 day."""
    return _review


@pytest.fixture
def three_reviews():
    """Scores 3, 4, 3 on consecutive days."""
    return [_review(3, 1), _review(4, 2), _review(3, 3)]


@pytest.fixture
def reviews_with_null_score():
    """Scores 3, null, 4. The null counts toward coverage only."""
    return [_review(3, 1), _review(None, 2), _review(4, 3)]


@pytest.fixture
def valid_scoring_payload():
    """Request body for POST /api/v1/cfp/scoring."""
    return {
        "reviews": [
            {"score_overall": 3, "created_at": "2024-01-01T10:00:00Z"},
            {"score_overall": 4, "created_at": "2024-01-02T10:00:00Z"},
            {"score_overall": 3, "created_at": "2024-01-03T10:00:00Z"},
        ],
        "total_reviewers": 5,
    }


@pytest.fixture
def submission_set_payload():
    """Three submissions covering shortlist, reject and no-review cases."""
    return {
        "submissions": [
            {
                "submission_id": "sub-strong",
                "title": "Scaling Rust at the Edge",
                "submission_type": "talk",
                "created_at": "2024-01-05T09:00:00Z",
                "total_reviewers": 4,
                "reviews": [
                    {"score_overall": 4, "created_at": "2024-01-10T10:00:00Z"},
                    {"score_overall": 3, "created_at": "2024-01-11T10:00:00Z"},
                    {"score_overall": 4, "created_at": "2024-01-12T10:00:00Z"},
                ],
            },
            {
                "submission_id": "sub-weak",
                "title": "Another TODO App",
                "submission_type": "workshop",
                "created_at": "2024-01-03T09:00:00Z",
                "total_reviewers": 4,
                "reviews": [
                    {"score_overall": 1, "created_at": "2024-01-10T10:00:00Z"},
                    {"score_overall": 2, "created_at": "2024-01-11T10:00:00Z"},
                    {"score_overall": 1, "created_at": "2024-01-12T10:00:00Z"},
                    {"score_overall": 1, "created_at": "2024-01-13T10:00:00Z"},
                ],
            },
            {
                "submission_id": "sub-new",
                "title": "Building Accessible Forms",
                "submission_type": "talk",
                "created_at": "2024-01-08T09:00:00Z",
                "total_reviewers": 4,
                "reviews": [],
            },
        ]
    }

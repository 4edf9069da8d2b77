from pydantic import BaseModel, Field
from datetime import datetime
from typing import Dict, List, Optional

from cfp_review.models.enumerations import ScoreTier, ShortlistStatus, SortOption
from cfp_review.models.review import ReviewIn


# =====================================================================
# Requests
# =====================================================================

class ScoringRequest(BaseModel):
    """Reviews of a single submission."""
    reviews: List[ReviewIn] = Field(default_factory=list)
    total_reviewers: int = Field(
        ...,
        ge=0,
        description="Reviewers eligible to review the submission"
    )


class ClassifyRequest(BaseModel):
    avg_score: Optional[float] = None
    review_count: int = Field(..., ge=0)
    coverage_ratio: float = Field(..., ge=0)


class SubmissionIn(BaseModel):
    """One submission with its reviews, as used by batch endpoints."""
    submission_id: str = Field(..., min_length=1)
    title: str = ""
    submission_type: Optional[str] = None
    created_at: Optional[datetime] = None
    abstract: str = ""
    speaker: Optional[str] = Field(
        default=None,
        description="Speaker name and email, searched alongside the title"
    )
    tags: List[str] = Field(default_factory=list)
    reviews: List[ReviewIn] = Field(default_factory=list)
    total_reviewers: int = Field(..., ge=0)


class InsightsRequest(BaseModel):
    submissions: List[SubmissionIn] = Field(default_factory=list)


class SubmissionFilterIn(BaseModel):
    search: Optional[str] = Field(
        default=None,
        description="Terms that must all match; \"quoted phrase\", -excluded"
    )
    submission_type: Optional[str] = None
    min_reviews: int = Field(default=0, ge=0)
    shortlist_only: bool = False


class RankingRequest(BaseModel):
    submissions: List[SubmissionIn] = Field(default_factory=list)
    filters: SubmissionFilterIn = Field(default_factory=SubmissionFilterIn)
    sort_by: SortOption = SortOption.NEWEST
    page: int = Field(default=1, ge=1)
    page_size: Optional[int] = Field(default=None, ge=1, le=200)


# =====================================================================
# Responses
# =====================================================================

class SubmissionScoringResponse(BaseModel):
    """SubmissionScoring plus display fields."""
    review_count: int
    avg_score: Optional[float] = None
    total_reviewers: int
    coverage_ratio: float
    coverage_percent: float
    last_reviewed_at: Optional[datetime] = None
    status: ShortlistStatus
    status_label: str
    avg_score_display: str
    coverage_display: str
    score_bucket: Optional[str] = None
    coverage_bucket: str
    score_tier: ScoreTier


class ClassifyResponse(BaseModel):
    status: ShortlistStatus
    label: str


class InsightsResponse(BaseModel):
    by_status: Dict[ShortlistStatus, int]
    by_score_bucket: Dict[str, int]
    by_coverage_bucket: Dict[str, int]
    total: int


class RankedSubmission(BaseModel):
    submission_id: str
    title: str
    submission_type: Optional[str] = None
    created_at: Optional[datetime] = None
    scoring: SubmissionScoringResponse


class RankingResponse(BaseModel):
    items: List[RankedSubmission]
    page: int
    page_size: int
    total_items: int
    total_pages: int


class BucketOut(BaseModel):
    key: str
    label: str
    min: float
    max: float


class BucketsResponse(BaseModel):
    score_buckets: List[BucketOut]
    coverage_buckets: List[BucketOut]
    status_labels: Dict[ShortlistStatus, str]
    status_tones: Dict[ShortlistStatus, str]
